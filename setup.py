from setuptools import setup, find_packages

setup(
    name="author-tool",
    version="0.1.0",
    description="Keep a deduplicated author.txt list for a version-controlled project",
    author="Your Name",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "author=authortool.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
