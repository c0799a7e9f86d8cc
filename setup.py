from setuptools import setup, find_packages

setup(
    name="range-split",
    version="0.1.0",
    description="Range-based splitting of byte buffers and UTF-8 range validation",

    package_dir={"": "src"},
    packages=find_packages(where="src"),

    install_requires=[
        "structlog>=23.1.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
    ],

    extras_require={
        "dev": [
            "pytest>=7.3.0",
            "pytest-cov>=4.0.0",
            "black>=23.3.0",
            "mypy>=1.3.0",
            "ruff>=0.0.270",
        ],
    },

    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.11",
    ],
)
