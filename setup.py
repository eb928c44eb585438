from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="storenav",
    version="0.1.0",
    description="Route graph engine for navigating retail venue layouts.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"storenav.schemas": ["*.json"]},
    python_requires=">=3.9",
    install_requires=["networkx", "PyYAML", "jsonschema"],
    extras_require={"dev": ["pytest", "numpy"]},
    tests_require=["pytest", "networkx"],
    entry_points={"console_scripts": ["storenav=storenav.cli:main"]},
)
