from setuptools import find_packages, setup

setup(
    name='parcel-client',
    version='0.1.0',
    description='Typed client for Parcel compute jobs and access grants',
    python_requires='>=3.8',
    packages=find_packages(exclude=[
        'parcelclient.test',
        'parcelclient.test.*',
    ]),
    install_requires=[
        'python-dateutil',
        'requests',
        'simplejson',
    ],
    extras_require={
        'test': [
            'mock',
            'pytest',
        ],
    },
    entry_points={
        "console_scripts": [
            "parcel = parcelclient.cli:main",
        ],
    }
)
