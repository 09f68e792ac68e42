from setuptools import setup, find_packages

setup(
    name="subharvest",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "subharvest = subharvest.cli:main",
        ],
    },
    description="Passive subdomain harvester over public OSINT sources",
    license="MIT",
    keywords="subdomain enumeration recon osint passive",
)
