import os
from setuptools import setup, find_packages


def get_requirements(filename: str = 'requirements.txt'):
    here = os.path.dirname(os.path.realpath(__file__))
    with open(os.path.join(here, filename), 'r') as f:
        requires = [line.strip() for line in f.readlines() if line.strip()]
    return requires


setup(
    name="TBR",
    version="1.0.0",
    description="Thumbnail box resizer: inset, crop and fill thumbnails for media storages",
    packages=find_packages(include=['TBR*']),
    python_requires='>=3.9',
    install_requires=get_requirements(),
    extras_require={
        "tests": get_requirements(os.path.join('requirements', 'requirements_tests.txt')),
    }
)
