from setuptools import setup, find_packages

setup(
    name="whatadistro",
    version="0.1.0",
    description="whatadistro: identify the running Linux distro from os-release",
    author="Alkama Sudad",
    packages=find_packages(exclude=["tests", "tests.*"]),  # whatadistro + utils
    python_requires=">=3.9",
    install_requires=["rich"],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
