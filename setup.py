from setuptools import setup, find_packages

setup(
    name="fourinarow",
    version="0.1.0",
    description="Rules engine for a two-player vertical four-in-a-row game",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",  # Environment wrapper for external agents
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "fourinarow=fourinarow.interfaces.cli:main",
        ],
    },
)
