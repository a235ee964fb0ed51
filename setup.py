from setuptools import setup, find_packages

setup(
    name="dotanim",
    version="0.1.0",
    description="Cycling dot animations for asyncio text sinks",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.11",
)
