from setuptools import setup, find_packages

setup(
    name="package-normalizer",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "packageurl-python",
        "typer<0.27",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
        ],
    },
    entry_points={
        "console_scripts": [
            "package-normalizer=package_normalizer.cli.main_cli:app",
        ],
    },
    description=(
        "Normalizes scanner package metadata into the package representation "
        "used for vulnerability matching"
    ),
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
