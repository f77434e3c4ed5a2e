# setup.py
from setuptools import setup, find_packages

setup(
    name="tree2dir",
    version="1.0.0",
    description="Convierte diagramas de árbol ASCII en directorios y archivos reales",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Encuentra automáticamente 'tree2dir' dentro de src/
    package_data={
        "tree2dir": ["interface/locales/*.json"],
    },
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tree2dir=tree2dir.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
