import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

INSTALL_REQUIRES = [
    "aiohttp>=3.8.0",
    "pydantic>=2.4",
    "yarl>=1.6.0",
]

TESTS_REQUIRE = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
]

setuptools.setup(
    name="nanoleaf_api",
    version="0.1.0",
    description="Typed asyncio client for the local Nanoleaf REST API.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": TESTS_REQUIRE},
)
