from setuptools import find_packages, setup

setup(
    name='cortex',
    version='0.1',
    description='A dense row-major matrix container with random-access and two-dimensional iterators',
    author='Tyler Swann',
    author_email='oraqlle@github.com',
    packages=find_packages(include=['cortex', 'cortex.*']),
    python_requires='>=3.9',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
