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

"""Module used to manage Redis containers on remote Docker engines

Every operation receives the address of the host whose engine should be used,
builds a client for that host on top of the shared Harbor transport and issues
the remote call(s). Failures of the engine or of the transport are translated into
the three engine error kinds (see berth.common.errors) and always reach the caller.
Misuse detected by the docker SDK itself, such as an empty container id, is raised
unchanged.
"""

from contextlib import contextmanager
from typing import Dict, List

from docker.errors import APIError, NotFound
from requests.exceptions import RequestException
from urllib3.exceptions import HTTPError as TransportError

from berth.bay.cargo import RedisCargo
from berth.bay.harbor import Harbor
from berth.bay.shipyard import ImageSpec, map_repo_tags, search_names, watch_pull
from berth.common.errors import EngineConnectionError, EngineError, RemoteAPIError, RemoteNotFoundError
from berth.common.logging import Logged, Logger


@contextmanager
def engine_call(host: str, action: str):
    
    try:
        yield
    except NotFound as e:
        raise RemoteNotFoundError(
            "Engine at {} could not {}: {}".format(host, action, e.explanation or e),
            host=host, status_code=e.status_code, explanation=e.explanation
        ) from e
    except APIError as e:
        raise RemoteAPIError(
            "Engine at {} could not {}: {}".format(host, action, e.explanation or e),
            host=host, status_code=e.status_code, explanation=e.explanation
        ) from e
    except (RequestException, TransportError) as e:
        raise EngineConnectionError(
            "Unable to reach engine at {} to {}".format(host, action),
            host=host
        ) from e


class DockerCaptain(Logged):
    
    def __init__(self, harbor: Harbor, log: Logger = None):
        
        Logged.__init__(self, log=log)
        assert isinstance(harbor, Harbor), "A shared Harbor must be provided"
        self.harbor = harbor
    
    @contextmanager
    def engine(self, host: str, action: str):
        
        with engine_call(host, action):
            self.LOG.debug("{}: {}".format(host, action))
            yield self.harbor.client_for(host)
    
    def info(self, host: str) -> dict:
        
        with self.engine(host, 'get engine info') as api:
            return api.info()
    
    def search_images(self, host: str, repository: str) -> List[str]:
        
        with self.engine(host, "search images for '{}'".format(repository)) as api:
            return search_names(api.search(repository))
    
    def images(self, host: str, name: str = None) -> Dict[str, str]:
        
        with self.engine(host, 'list images') as api:
            found = api.images(name=name or None)
        
        return map_repo_tags(found)
    
    def image_exists(self, host: str, image: str) -> bool:
        
        return len(self.images(host, image)) > 0
    
    def inspect_container(self, host: str, container_id: str) -> dict:
        
        with self.engine(host, "inspect container '{}'".format(container_id)) as api:
            return api.inspect_container(container_id)
    
    def run_container(self, host: str, port: int, image: str, name: str, cmd: List[str]) -> str:
        
        """Creates and starts a Redis container, returning its id
        
        The container shares the host's network and has /data/redis/<port> mounted at /data.
        Creation and start are two separate calls: if the start fails the created container
        is left behind and the error is raised, so the caller can find and remove it.
        """
        
        cargo = RedisCargo(port=port, image=image, name=name, cmd=cmd)
        self.LOG.info("Creating container '{}' from {} on {}".format(cargo.container_name, image, host))
        
        with self.engine(host, "create container '{}'".format(cargo.container_name)) as api:
            kwargs = cargo.create_kwargs(api)
            self.LOG.debug(kwargs)
            cont = api.create_container(**kwargs)
        
        cont_id = cont['Id']
        
        for warning in cont.get('Warnings') or []:
            self.LOG.warning("{}: {}".format(cargo.container_name, warning))
        
        try:
            with self.engine(host, "start container '{}'".format(cargo.container_name)) as api:
                api.start(cont_id)
        except EngineError as e:
            self.LOG.error(
                "Container '{}' ({}) was created on {} but did not start. It has not been removed"
                .format(cargo.container_name, cont_id, host)
            )
            self.LOG.error(e.pretty())
            raise
        
        self.LOG.info("Started container '{}' ({}) on {}".format(cargo.container_name, cont_id, host))
        return cont_id
    
    def restart_container(self, host: str, container_id: str):
        
        with self.engine(host, "restart container '{}'".format(container_id)) as api:
            api.restart(container_id)
    
    def stop_container(self, host: str, container_id: str):
        
        with self.engine(host, "stop container '{}'".format(container_id)) as api:
            api.stop(container_id)
    
    def remove_container(self, host: str, container_id: str):
        
        with self.engine(host, "remove container '{}'".format(container_id)) as api:
            api.remove_container(container_id)
    
    def pull_image(self, host: str, repository: str, tag: str = None) -> bool:
        
        img = ImageSpec(repository, tag=tag)
        self.LOG.info("Pulling {} on {}".format(img, host))
        
        with self.engine(host, "pull image '{}'".format(img)) as api:
            logs = api.pull(img.repository, tag=img.tag, stream=True, decode=True)
            watch_pull(logs, img=img, host=host, log=self.LOG)
        
        self.LOG.info("Pulled {} on {}".format(img, host))
        return True
