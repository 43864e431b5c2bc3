from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pocketcasts_api",
    version="0.0.1",
    description="An async client library for using the Pocket Casts web API.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=["pocketcasts_api", "pocketcasts_api.*"]),
    install_requires=[
        "aiohttp",
        "yarl",
        "mashumaro[orjson]",
        "orjson",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "aresponses",
        ],
    },
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.11",
)
