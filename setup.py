import setuptools

setuptools.setup(
    name="hexcolorize",
    version="0.1.0",
    description="Hex color and style formatting for true-color and 256-color ANSI terminals.",
    author="Chase McDonald",
    author_email="chasecmcdonald@gmail.com",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hexcolorize=hexcolorize.cli:main",
        ],
    },
)
