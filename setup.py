from setuptools import setup, find_packages

setup(name="lamcalc",
    version="0.1.0",
    license='MIT',
    python_requires=">=3.9",
    install_requires=[
        "ply",
        "numpy"
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "lamcalc=lamcalc.execute:main",
        ],
    },
    extras_require={
        "dev": ["pytest>=7"],
    },
)
