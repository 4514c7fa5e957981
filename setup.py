"""Setup script for strategy-dashboard package."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="strategy-dashboard",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Strategy dashboard with mock equity curves and portfolio analytics",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/strategy-dashboard",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run_dashboard"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Financial and Insurance Industry",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "strategy-dashboard=run_dashboard:main",
        ],
    },
)
