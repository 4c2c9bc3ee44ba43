"""
Setup configuration for buyermap package.
"""

from setuptools import setup, find_packages

setup(
    name="buyermap",
    version="0.1.0",
    description="ICP assumption validation against customer interviews",
    packages=find_packages(include=["buyermap", "buyermap.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "httpx>=0.26",
        "python-dotenv>=1.0",
        "supabase>=2.3",
        "streamlit>=1.32",
        "pandas>=2.0",
        "click>=8.1",
        "logfire[fastapi]>=0.40",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "buyermap=buyermap.cli.main:cli",
        ],
    },
)
