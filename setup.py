# setup.py
from setuptools import setup, find_packages

setup(
    name="treetext",
    version="1.0.0",
    description="Convierte esquemas de texto indentado en árboles de directorios y formatos estructurados",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Encuentra automáticamente la carpeta 'treetext'
    package_data={
        "treetext": ["interface/locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treetext=treetext.main:main',  # Permite ejecutar la herramienta vía CLI
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
