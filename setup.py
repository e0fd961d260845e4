from setuptools import find_namespace_packages, setup

setup(
    name="dissect-options",
    version="0.1.0",
    # The import root is the "src" package itself (``from src.core...``).
    packages=find_namespace_packages(include=["src", "src.*"]),
    install_requires=[
        "pydantic>=2.0",
        "structlog",
        "PyYAML",
        "python-dotenv",
    ],
    extras_require={
        "dev": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "dissect-opts=src.core.cli:run",
        ],
    },
    description="Command-line dissection option handling for a packet analyzer.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
