from setuptools import setup, find_packages

setup(
    name="clearlydefined-client",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
            "types-requests",
        ],
    },
    entry_points={
        "console_scripts": [
            "clearlydefined=clearlydefined_client.cli.main_cli:app",
        ],
    },
    author="Damian Vicino",
    author_email="damian.vicino@datadoghq.com",
    description="A typed client for the ClearlyDefined component metadata service",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/DataDog/clearlydefined-client",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
