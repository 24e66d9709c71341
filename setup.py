#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from setuptools import setup


setup(
    name='WatsonKit',
    version='0.2.0',
    description='Client SDKs and a Flask extension for the IBM Watson Developer Cloud services',
    author='Boris Raicheff',
    author_email='b@raicheff.com',
    url='https://github.com/raicheff/flask-watson',
    install_requires=['flask', 'blinker', 'requests', 'pydantic>=2', 'websockets>=13'],
    extras_require={'test': ['pytest', 'pytest-asyncio']},
    packages=['watsonkit', 'watsonkit.services'],
    python_requires='>=3.9',
)


# EOF
