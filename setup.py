#!/usr/bin/env python

import setuptools

def reqs_from_file(src):
    requirements = []
    with open(src) as f:
        for line in f:
            line = line.strip()
            if line == '' or line.startswith('#'):
                continue
            if not line.startswith("-r"):
                requirements.append(line)
            else:
                add_src = line.split(' ')[1]
                add_req = reqs_from_file(add_src)
                requirements.extend(add_req)
    return requirements

if __name__ == "__main__":
    with open("README.md", "r") as fh:
        long_description = fh.read()

    requirements = reqs_from_file("requirements.txt")

    setuptools.setup(
        name="network-stats-plot",
        version="1.0",
        install_requires=requirements,
        extras_require={
            "test": ["pytest"],
        },
        python_requires=">=3.8",
        description="Plot network size and number of sections of a network simulation",
        long_description=long_description,
        long_description_content_type="text/markdown",
        packages=["network_stats_plot", "network_stats_plot.utils"],
        entry_points={
            "console_scripts": [
                "network-stats-plot = network_stats_plot.cli:cli",
            ]
        },
        )
