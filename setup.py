from setuptools import find_packages, setup


setup(
    name="adante",
    version="0.2.0",
    description="Classify command-line tokens into flags and actions with caller-defined key types",
    author="adante contributors",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["adante=adante.cli:main"],
    },
)
