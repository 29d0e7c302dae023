# setup.py
from setuptools import setup, find_packages

setup(
    name="rtlisp",
    version="0.1.0",
    description="Right-to-Leftsp: a small Lisp with a deep-reversing reader macro",
    packages=find_packages(include=("rtlisp", "rtlisp.*")),
    package_data={"rtlisp": ["prelude/*.rtl"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
