# -*- coding: utf-8 -*-
"""
WiNoC Topology Layer
Setup script for package installation
"""

from setuptools import setup, find_packages
import os


# 读取README文件
def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        return fh.read()


# 读取requirements
def read_requirements():
    requirements = []
    if os.path.exists("requirements.txt"):
        with open("requirements.txt", "r", encoding="utf-8") as f:
            requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]
    return requirements


setup(
    name="WiNoC",
    version="1.0.0",
    author="WiNoC Development Team",
    description="Topology and distance model for hybrid wired/wireless mesh Network-on-Chip",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["src", "src.*", "examples"]),
    package_data={"src.winoc.configs": ["*.yaml"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
        "Topic :: System :: Networking",
    ],
    python_requires=">=3.8",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "networkx>=2.8",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "winoc-demo=examples.winoc_distance_demo:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="noc, wireless, mesh, topology, network-on-chip, simulation",
)
