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

"""Module for the transport that is shared by every engine client

A single Harbor is built when the process starts and handed to whoever needs to talk
to an engine. Each call still gets its own docker.APIClient, bound to one host, but
all of them are mounted on the same connection pool, so connections to a given host
are reused across calls. Each host gets at most max_per_route_connections connections
at a time (further callers wait), and pools are kept for at most
max_total_connections // max_per_route_connections hosts. When more hosts than that
are in use, the least recently used pool is closed.
"""

import docker
from docker.errors import DockerException, InvalidVersion
from requests.adapters import HTTPAdapter

from berth.bay.compass import DockerCompass
from berth.common.constants import DockerConst
from berth.common.errors import ConfigurationError, EngineConnectionError
from berth.common.logging import Logged, Logger


class PoolSpec(object):
    
    def __init__(self, max_total_connections: int = DockerConst.Pool.MAX_TOTAL,
                 max_per_route_connections: int = DockerConst.Pool.MAX_PER_ROUTE,
                 connect_timeout: float = DockerConst.Pool.CONNECT_TIMEOUT,
                 read_timeout: float = DockerConst.Pool.READ_TIMEOUT):
        
        if max_per_route_connections < 1 or max_total_connections < max_per_route_connections:
            raise ConfigurationError(
                "Invalid connection pool limits: {} in total, {} per route"
                .format(max_total_connections, max_per_route_connections)
            )
        
        if connect_timeout is None or read_timeout is None or min(connect_timeout, read_timeout) <= 0:
            raise ConfigurationError(
                "Connection timeouts must be positive. Got connect={}, read={}"
                .format(connect_timeout, read_timeout)
            )
        
        self.max_total_connections = max_total_connections
        self.max_per_route_connections = max_per_route_connections
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
    
    @classmethod
    def from_compass(cls, compass: DockerCompass = None):
        
        compass = compass or DockerCompass()
        
        return cls(
            max_total_connections=compass.max_total_connections,
            max_per_route_connections=compass.max_per_route_connections,
            connect_timeout=compass.connect_timeout,
            read_timeout=compass.read_timeout
        )
    
    @property
    def num_pools(self):
        
        """How many per-host pools are kept, so that pools * per-route size never exceeds the total"""
        
        return max(1, self.max_total_connections // self.max_per_route_connections)
    
    def __repr__(self):
        
        return '{}(total={}, per_route={}, connect_timeout={}, read_timeout={})'.format(
            self.__class__.__name__,
            self.max_total_connections,
            self.max_per_route_connections,
            self.connect_timeout,
            self.read_timeout
        )


class PooledAdapter(HTTPAdapter):
    
    """HTTP adapter that splits the engine client's single timeout into connect and read timeouts"""
    
    def __init__(self, pool_spec: PoolSpec):
        
        self.connect_timeout = pool_spec.connect_timeout
        self.read_timeout = pool_spec.read_timeout
        
        super().__init__(
            pool_connections=pool_spec.num_pools,
            pool_maxsize=pool_spec.max_per_route_connections,
            max_retries=0,
            pool_block=True  # callers wait for a free connection once a host reaches its limit
        )
    
    def send(self, request, timeout=None, **kwargs):
        
        if timeout is None:  # streamed calls (e.g.: image pull) are still bound by the read timeout
            timeout = (self.connect_timeout, self.read_timeout)
        elif isinstance(timeout, (int, float)):
            timeout = (self.connect_timeout, timeout)
        
        return super().send(request, timeout=timeout, **kwargs)


class Harbor(Logged):
    
    def __init__(self, pool_spec: PoolSpec = None, compass: DockerCompass = None, log: Logger = None):
        
        Logged.__init__(self, log=log)
        self.compass = compass or DockerCompass()
        self.pool_spec = pool_spec or PoolSpec.from_compass(self.compass)
        self.adapter = PooledAdapter(self.pool_spec)
        self.LOG.debug("Shared engine transport ready: {}".format(self.pool_spec))
    
    def endpoint(self, host: str):
        
        return self.compass.daemon_address(host)
    
    def client_for(self, host: str) -> docker.APIClient:
        
        address = self.endpoint(host)
        
        try:
            api = docker.APIClient(
                base_url=address,
                version=self.compass.api_version,
                timeout=self.pool_spec.read_timeout
            )
        except InvalidVersion as e:
            raise ConfigurationError("Unsupported engine API version: {}".format(e)) from e
        except DockerException as e:  # unparsable address, or failed version request with 'auto'
            raise EngineConnectionError(
                "Unable to connect to engine at {}: {}".format(address, e),
                host=host
            ) from e
        except ValueError as e:  # raised by urllib for malformed host addresses
            raise EngineConnectionError(
                "Invalid engine address '{}': {}".format(address, e),
                host=host
            ) from e
        
        api.trust_env = False  # engines are always addressed directly, never through proxies
        api.mount('http://', self.adapter)
        return api
    
    def close(self):
        
        """Releases every pooled connection. Not needed while the process is alive"""
        
        self.adapter.close()
