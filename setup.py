from setuptools import find_namespace_packages, setup

setup(
    name="move-file-safety",
    version="1.0.0",
    packages=find_namespace_packages(include=["src", "src.*"]),
    package_dir={"src": "src"},
    install_requires=[line for line in open("requirements-core.txt").read().splitlines() if line],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "move-file-safety=src.cli:main",
        ],
    },
)
