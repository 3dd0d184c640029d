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

from berth.bay.captain import DockerCaptain
from berth.bay.harbor import Harbor, PoolSpec
from berth.common.constants import FrameworkConst
from berth.common.errors import EngineError, EngineConnectionError, RemoteAPIError, RemoteNotFoundError

__version__ = FrameworkConst.FW_VERSION
