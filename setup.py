from setuptools import setup, find_packages

setup(
    name='fingroup',
    version='0.0.1',
    description='finite groups: subgroups, conjugacy, homomorphisms, quotients',
    packages=find_packages(),
    install_requires=['numpy >= 1.11.1'],
    extras_require={'test': ['pytest']},
)
