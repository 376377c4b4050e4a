# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="noteindex",
    version="1.0.0",
    description="Genera un índice markdown jerárquico de las notas de un directorio",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["noteindex", "noteindex.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'noteindex=noteindex.main:main',  # Ejecuta el indexador vía CLI
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
