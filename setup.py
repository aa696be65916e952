"""Setup configuration for CULTURA - Northeast India cultural heritage assistant"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="cultura",
    version="0.1.0",
    author="CULTURA Heritage Team",
    description="CULTURA: festivals, rituals and traditions of Northeast India, with offline-first translation and chat",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"cultura": ["data/*.json"]},
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.31.0",
        "colorama>=0.4.6",
        "anthropic>=0.25.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "cultura=cultura.cli:main",
        ],
    },
)
