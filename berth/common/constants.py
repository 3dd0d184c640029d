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

"""Module for keeping widely used constants"""

import os

from docker.constants import DEFAULT_DOCKER_API_VERSION


class FrameworkConst(object):
    
    FW_VERSION = '0.3.0'


class Encoding(object):
    
    UTF_8 = 'UTF-8'


class EnvVar(object):
    
    """Names of environment variables"""
    
    DOCKER_HOST = 'BERTH_DOCKER_HOST'
    TEST_HOST = 'BERTH_TEST_HOST'  # read by the integration tests only


class DateFmt(object):
    
    READABLE = '%Y-%m-%d %H:%M:%S'


class Config(object):
    
    """Name conventions in configuration files and paths"""
    
    FMT = 'yaml'
    FILE = 'berth.{}'.format(FMT)
    LOCAL = os.path.join(os.getcwd(), FILE)
    
    class Namespace(object):
        
        DOCKER = 'docker'
        LOGGER = 'logger'


class Package(object):
    
    """Paths inside the python package"""
    
    BASE = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    RESOURCES = os.path.join(BASE, 'resources')
    CONF = os.path.join(RESOURCES, Config.FILE)


class HostUser(object):
    
    """Paths inside the user home on host machines"""
    
    HOME = os.path.expanduser('~')
    BERTH = os.path.join(HOME, '.berth')
    LOG_DIR = os.path.join(BERTH, 'logs')
    CONF = os.path.join(BERTH, Config.FILE)


class LoggerConst(object):
    
    DEFAULT_NAME = 'berth'
    FILE_EXT = 'log'
    DEFAULT_DIR = HostUser.LOG_DIR
    FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class DockerConst(object):
    
    """Docker-related nomenclature standards"""
    
    DEFAULT_DAEMON_ADDRESS = 'tcp://{}:2375'
    NETWORK_MODE = 'host'
    API_VERSION = DEFAULT_DOCKER_API_VERSION  # pinned, so building a client does no I/O
    
    class Pool(object):
        
        """Shared transport defaults"""
        
        MAX_TOTAL = 1000
        MAX_PER_ROUTE = 100
        CONNECT_TIMEOUT = 10  # seconds
        READ_TIMEOUT = 10  # seconds


class RedisConst(object):
    
    """Conventions for Redis instances managed in containers"""
    
    DATA_DIR = '/data'  # inside the container
    HOST_DATA_DIR = '/data/redis/{port}'
    VOLUME = HOST_DATA_DIR + ':' + DATA_DIR
    NAME_FMT = '{prefix}-{port}'
