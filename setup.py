"""Setup script for gaborframe."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="gaborframe",
    version="0.1.0",
    author="Your Name",
    description="Discrete Gabor frames, dual windows and time-frequency transforms on cyclic domains",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/gaborframe",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
        "scipy>=1.10.0",
    ],
    extras_require={
        "dev": ["pytest", "black", "flake8"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "gaborframe-demo=gaborframe.demo:main",
        ],
    },
)
