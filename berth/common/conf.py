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

"""Module for loading the layered YAML configuration

Three files are looked up: the defaults shipped inside the package, the user's
~/.berth/berth.yaml and ./berth.yaml in the working directory. The local file
replaces the user file. Each namespace is read on first access, not on import.
"""

import os
from kaptan import Kaptan

from berth.common.constants import Package, Config, HostUser
from berth.common.errors import ConfigurationError


class ConfSource(object):
    
    PKG = Package.CONF
    USER = HostUser.CONF
    LOCAL = Config.LOCAL
    
    ALL = [PKG, USER, LOCAL]


class LazyConf(dict):
    
    def __init__(self, namespace: str, sources: list = None):
        
        super().__init__()
        sources = sources or ConfSource.ALL
        assert isinstance(sources, (list, tuple)) and len(sources) == 3
        self.sources = sources
        self.namespace = namespace
        self.loaded = False
    
    def _read(self, path: str):
        
        if not os.path.exists(path):
            return None
        
        return Kaptan(handler=Config.FMT).import_config(path).get(self.namespace, {}) or {}
    
    def load(self):
        
        pkg_path, user_path, local_path = self.sources
        defaults = self._read(pkg_path)
        
        if defaults is None:
            raise ConfigurationError("Default configuration not found at {}".format(pkg_path))
        
        overrides = self._read(local_path)
        
        if overrides is None:
            overrides = self._read(user_path) or {}
        
        self.clear()
        super().update(defaults)
        super().update(overrides)
        self.loaded = True
        return self
    
    def _assert_loaded(self):
        
        if not self.loaded:
            self.load()
    
    def get(self, key, default=None):
        
        self._assert_loaded()
        return super().get(key, default)
    
    def __getitem__(self, key):
        
        self._assert_loaded()
        return super().__getitem__(key)
    
    def __contains__(self, key):
        
        self._assert_loaded()
        return super().__contains__(key)
    
    def as_dict(self):
        
        self._assert_loaded()
        return dict(self)


DockerConf = LazyConf(namespace=Config.Namespace.DOCKER)
LoggerConf = LazyConf(namespace=Config.Namespace.LOGGER)
