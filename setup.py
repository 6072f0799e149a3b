from setuptools import setup, find_packages

setup(
    name="killer-sudoku",
    version="1.0.0",
    description="Constraint propagation and backtracking solver for Sudoku and Killer Sudoku",
    author="robomotic",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
