from setuptools import setup, find_packages

setup(
    name="simplecheckers",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["simplecheckers=simplecheckers.__main__:main"],
    },
    description="Rule engine for English draughts without crowning",
)
