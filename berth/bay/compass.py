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
This module helps with configuration resolutions

Each compass reads one namespace of the layered configuration (see berth.common.conf)
and exposes typed values, falling back to the framework defaults when a key is absent
"""

import os

from berth.common.conf import LazyConf, DockerConf, LoggerConf
from berth.common.constants import DockerConst, EnvVar, Encoding, LoggerConst
from berth.common.parser import resolve_log_level


class Compass(object):
    
    conf: LazyConf = None
    
    def __init__(self, custom_conf: dict = None):
        
        if custom_conf is not None:
            self.conf = dict(self.conf.as_dict(), **custom_conf)


class DockerCompass(Compass):
    
    conf = DockerConf
    
    KEY_DAEMON_ADDRESS = 'daemon_address'
    KEY_CONNECT_TIMEOUT = 'connect_timeout'
    KEY_READ_TIMEOUT = 'read_timeout'
    KEY_MAX_TOTAL = 'max_total_connections'
    KEY_MAX_PER_ROUTE = 'max_per_route_connections'
    KEY_API_VERSION = 'api_version'
    
    @property
    def daemon_template(self):
        
        return os.environ.get(EnvVar.DOCKER_HOST) \
            or self.conf.get(self.KEY_DAEMON_ADDRESS) \
            or DockerConst.DEFAULT_DAEMON_ADDRESS
    
    def daemon_address(self, host: str):
        
        return self.daemon_template.format(host)
    
    @property
    def api_version(self):
        
        return str(self.conf.get(self.KEY_API_VERSION) or DockerConst.API_VERSION)
    
    @property
    def connect_timeout(self):
        
        return self.conf.get(self.KEY_CONNECT_TIMEOUT, DockerConst.Pool.CONNECT_TIMEOUT)
    
    @property
    def read_timeout(self):
        
        return self.conf.get(self.KEY_READ_TIMEOUT, DockerConst.Pool.READ_TIMEOUT)
    
    @property
    def max_total_connections(self):
        
        return self.conf.get(self.KEY_MAX_TOTAL, DockerConst.Pool.MAX_TOTAL)
    
    @property
    def max_per_route_connections(self):
        
        return self.conf.get(self.KEY_MAX_PER_ROUTE, DockerConst.Pool.MAX_PER_ROUTE)


class LoggerCompass(Compass):
    
    conf = LoggerConf
    
    KEY_NAME = 'name'
    KEY_LVL = 'level'
    KEY_DIR = 'directory'
    KEY_MAX_BYTES = 'max_bytes'
    KEY_BKP_COUNT = 'bkp_count'
    KEY_JOIN_ROOT = 'join_root'
    
    @property
    def name(self):
        
        return self.conf.get(self.KEY_NAME, LoggerConst.DEFAULT_NAME)
    
    @property
    def lvl(self):
        
        return resolve_log_level(self.conf[self.KEY_LVL])
    
    @property
    def max_bytes(self):
        
        return self.conf[self.KEY_MAX_BYTES]
    
    @property
    def bkp_count(self):
        
        return self.conf[self.KEY_BKP_COUNT]
    
    @property
    def log_file_dir(self):
        
        return self.conf.get(self.KEY_DIR) or LoggerConst.DEFAULT_DIR
    
    @property
    def log_file_name(self):
        
        return '{}.{}'.format(self.name, LoggerConst.FILE_EXT)
    
    @property
    def path_to_log_file(self):
        
        return os.path.join(self.log_file_dir, self.log_file_name)
    
    @property
    def file_handler_kwargs(self):
        
        return dict(
            filename=self.path_to_log_file,
            maxBytes=self.max_bytes,
            backupCount=self.bkp_count,
            encoding=Encoding.UTF_8
        )
    
    @property
    def join_root(self):
        
        """Whether records also reach the handlers of the root logger"""
        
        return bool(self.conf.get(self.KEY_JOIN_ROOT, False))
