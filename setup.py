"""Package setup for thorn_crawler."""

from setuptools import setup, find_packages

setup(
    name="thorn-crawler",
    version="1.0.0",
    description="Exports a Thorn knowledge base to Markdown or PDF, mirroring its folder tree",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "playwright>=1.40.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "markdownify>=0.12.0",
    ],
    extras_require={
        "ui": [
            "tqdm>=4.66.0",
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "thorn-crawler=thorn_crawler.cli:main",
        ],
    },
)
