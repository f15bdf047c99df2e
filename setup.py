# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="unitcatalog",
    version="1.0.0",
    description="Browse hierarchical unit catalogs and filter them with free-text queries",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["unitcatalog", "unitcatalog.*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests",  # Remote catalog documents
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'unitcatalog=unitcatalog.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
