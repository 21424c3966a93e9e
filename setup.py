from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="cachematrix",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    description="Matrix inverse that is computed once and cached until the matrix changes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "dev": [
            "pytest>=5.2",
        ],
    },
    python_requires=">=3.8",
)
