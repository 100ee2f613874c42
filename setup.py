from setuptools import setup, find_packages

setup(
    name="cyclecomplete",
    version="0.1.0",
    description="Cycle the word under the cursor through fuzzy matches from the document",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PyQt5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cyclecomplete=cyclecomplete.main:main",
        ],
    },
)
