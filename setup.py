"""
Setup script for the gamer-pool package.
"""

from setuptools import setup, find_packages

setup(
    name="gamer-pool",
    version="1.0.0",
    description="Gamer pool - real-time matchmaking by skill and latency",
    author="Gamer Pool Maintainers",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    package_data={
        "gamer_pool._store": ["schema.sql"],
    },
    entry_points={
        "console_scripts": [
            "gamer-pool=gamer_pool.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
