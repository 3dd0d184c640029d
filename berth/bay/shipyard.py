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

"""Module for handling Docker images"""

from typing import Iterable, List

from docker.utils import parse_repository_tag

from berth.common.errors import RemoteAPIError
from berth.common.logging import LOG, Logger
from berth.common.parser import assert_dict


class ImageSpec(object):
    
    def __init__(self, repository: str, tag: str = None):
        
        assert repository, "An image reference needs a repository"
        repo, ref_tag = parse_repository_tag(repository)
        self.repository = repo
        self.tag = tag or ref_tag or None  # None defers to the engine's default tag
    
    @property
    def target(self):
        
        if self.tag is None:
            return self.repository
        elif self.tag.startswith('sha256:'):
            return '{}@{}'.format(self.repository, self.tag)
        else:
            return '{}:{}'.format(self.repository, self.tag)
    
    def __str__(self):
        
        return self.target
    
    def __repr__(self):
        
        return '{}({})'.format(self.__class__.__name__, self.target)


def map_repo_tags(images: Iterable[dict]) -> dict:
    
    """Maps each tag-qualified reference to the id of the image it points to
    
    An image with multiple tags shows up once per tag, always with the same id.
    Untagged (dangling) images have nothing to contribute.
    """
    
    image_map = {}
    
    for image in images or []:
        for repo_tag in image.get('RepoTags') or []:
            image_map[repo_tag] = image['Id']
    
    return image_map


def search_names(results: Iterable[dict]) -> List[str]:
    
    return [item['name'] for item in results or []]


def watch_pull(logs, img: ImageSpec = None, host: str = None, log: Logger = None):
    
    """Consumes a pull stream until the engine reports completion"""
    
    log = log or LOG
    last_status = None
    
    for line in logs:
        dyct = assert_dict(line)
        
        if 'error' in dyct:
            detail = dyct.get('errorDetail') or {}
            raise RemoteAPIError(
                "Failed to pull image '{}'. Error: {}".format(img, dyct['error'].strip()),
                host=host,
                status_code=detail.get('code'),
                explanation=detail.get('message') or dyct['error']
            )
        
        status = dyct.get('status')
        
        if status and status != last_status and 'id' not in dyct:
            log.debug(status)
        
        last_status = status
    
    return last_status
