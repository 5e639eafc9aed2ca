"""Setup script for compliance_docs package."""

from setuptools import setup, find_packages

setup(
    name="compliance_docs",
    version="1.0.0",
    description="Aviation parts compliance document generation (certificates, MTRs, packing slips)",
    author="Continental Machines Inc.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pymupdf>=1.23.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "compliance-docs=compliance_docs.cli:main",
        ],
    },
)
