# setup.py
from setuptools import setup, find_packages

setup(
    name="bebop-lisp",
    version="0.1.0",
    description="A small Lisp for preprocessing Markdown documents",
    packages=find_packages(include=["bebop", "bebop.*"]),
    # The prelude is read from the installed package directory
    package_data={"bebop": ["prelude/std/*.lisp"]},
    include_package_data=True,
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
