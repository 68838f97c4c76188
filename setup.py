"""Setup configuration for the wrap-text package."""

from setuptools import setup, find_packages

setup(
    name="wrap-text",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0.0",
        "halo>=0.0.31",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wrap-text=wrap_text.cli.main:main",
        ],
    },
    description="Paragraph wrapping, filling, shortening and re-indenting for plain text",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing",
    ],
    python_requires=">=3.11",
)
