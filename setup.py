# -*- coding: utf-8 -*-

# Copyright Berth Development Team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Berth manages the lifecycle of Redis server containers
on a fleet of hosts, through each host's Docker engine API
"""

import os
from setuptools import find_packages, setup


HERE = os.path.dirname(os.path.abspath(__file__))

setup(
    name='berth',
    version='0.3.0',
    author='Berth Development Team',
    description='Redis container lifecycle over remote Docker engines',
    long_description=__doc__,
    zip_safe=False,
    platforms=['Unix'],
    license='Apache-2.0',
    python_requires='>=3.8',
    install_requires=[
        req for req in open(os.path.join(HERE, 'requirements.txt')).read().split('\n')
        if req.strip() and not req.startswith('#')
    ],
    extras_require={
        'test': ['pytest']
    },
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={
        'berth': [
            'resources/berth.yaml'
        ]
    },
    classifiers=[
        # As from http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: Unix',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Systems Administration'
    ]
)
