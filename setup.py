from setuptools import setup, find_packages

setup(
    name="dialog-extractor",
    version="0.1.0",
    description="Plan dialog-only audio extraction from subtitle timings and chapters",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "dialog-extractor=dialog_extractor.cli:main",
        ],
    },
)
