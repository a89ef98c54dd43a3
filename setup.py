from setuptools import find_packages, setup

setup(
    name="bestlang",
    version="0.1.0",
    description="BestLang - a literal language that compiles to JavaScript",
    python_requires=">=3.10",
    packages=find_packages(include=["bestlang", "bestlang.*"]),
    install_requires=[],
    entry_points={
        "console_scripts": [
            "bestlang=bestlang.cli:main",
        ],
    },
)
