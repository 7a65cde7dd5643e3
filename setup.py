#!/usr/bin/env python
from setuptools import setup

project = "rdflib-dataobjects"
version = "0.1.0"


setup(
    name=project,
    version=version,
    description="rdflib extension storing quads in any SQL database through dialect adapters",
    packages=["rdflib_dataobjects", "rdflib_dataobjects.adapters"],
    license="BSD",
    platforms=["any"],
    long_description="""
    DataObjects-style quad store for rdflib.
    It stores every statement as one row of four text columns
    (subject, predicate, object, context) holding the N-Triples form of
    each term, optionally shortened with namespace prefixes.

    SQL is produced by a per-dialect adapter; SQLite, PostgreSQL and MySQL
    adapters are included and more can be registered at runtime.
    """,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Operating System :: OS Independent",
        "Natural Language :: English",
    ],
    python_requires=">=3.8",
    install_requires=[
        "rdflib>=6.0",
        "SQLAlchemy>=1.4",
    ],
    extras_require={
        "test": ["pytest"],
        "postgresql": ["psycopg2"],
        "mysql": ["pymysql"],
    },
    entry_points={
        'rdf.plugins.store': [
            'DataObjects = rdflib_dataobjects.store:DataObjects'
        ]
    }
)
