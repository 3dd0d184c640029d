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

"""Module for describing the Redis containers that get provisioned

A Redis instance always runs with the host's network stack and keeps its data
under a host directory derived from its port, mounted at /data in the container:

    docker run --name redis-instance-8000 --net host -v /data/redis/8000:/data \\
        redis:4.0.14 redis-server --port 8000 ...
"""

from typing import List

from berth.common.constants import DockerConst, RedisConst


class RedisCargo(object):
    
    def __init__(self, port: int, image: str, name: str, cmd: List[str] = None):
        
        self.port = port
        self.image = image
        self.name = name
        self.cmd = list(cmd or [])
    
    @property
    def container_name(self):
        
        return RedisConst.NAME_FMT.format(
            prefix=self.name.replace(' ', '-'),
            port=self.port
        )
    
    @property
    def host_path(self):
        
        return RedisConst.HOST_DATA_DIR.format(port=self.port)
    
    @property
    def bind(self):
        
        return RedisConst.VOLUME.format(port=self.port)
    
    @property
    def network_mode(self):
        
        return DockerConst.NETWORK_MODE
    
    def host_config(self, api):
        
        return api.create_host_config(
            network_mode=self.network_mode,
            binds=[self.bind]
        )
    
    def create_kwargs(self, api) -> dict:
        
        kwargs = dict(
            image=self.image,
            name=self.container_name,
            host_config=self.host_config(api)
        )
        
        if self.cmd:  # arguments go as they are, empty strings included
            kwargs['command'] = self.cmd
        
        return kwargs
    
    def __repr__(self):
        
        return '{}({}, image={})'.format(self.__class__.__name__, self.container_name, self.image)
