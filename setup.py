# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sway-utils",
    version="0.1.0",
    description="Directory tree discovery helpers for Sway projects (Forc manifests and .sw sources)",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sway_utils*"]),
    python_requires=">=3.10",  # os.path.realpath(strict=...)
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
