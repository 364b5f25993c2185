from setuptools import find_packages, setup

setup(
    name='stylecomposer',
    version='0.1.0',
    description="Declarative style-theme composition engine",
    packages=find_packages(include=['stylecomposer', 'stylecomposer.*']),
    python_requires='>=3.10',
    install_requires=[
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
)
