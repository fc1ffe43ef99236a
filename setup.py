from setuptools import setup, find_packages

setup(
    name="hypernum",
    version="1.0.0",
    description="Hypercomplex number algebras over arbitrary-precision reals",
    packages=find_packages(include=["hypernum", "hypernum.*"]),
    install_requires=[
        "mpmath",
        "numpy",
        "torch",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
    entry_points={
        'console_scripts': [
            'hypernum=hypernum.__main__:main',
        ],
    },
)
