from setuptools import setup, find_packages

setup(
    name='ecdfPy',
    version='0.1.0',
    description='Empirical CDF ranks of observations against a reference sample',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'examples']),
    install_requires=[
        "numpy>=1.19.0",
    ],
    extras_require={
        "test": [
            "scipy>=1.6.0",
            "pytest",
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
    ],
    license='GNU General Public License v3 (GPLv3)',
    python_requires='>=3.7',
)
