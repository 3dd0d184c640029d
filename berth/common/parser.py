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

import json
import logging

from berth.common.constants import Encoding


def assert_dict(x) -> dict:
    
    """Reads one entry of an engine stream, which may arrive decoded or as raw JSON"""
    
    if isinstance(x, dict):
        return x
    elif isinstance(x, bytes):
        x = x.decode(Encoding.UTF_8)
    
    if not isinstance(x, str):
        raise TypeError("Expected str, bytes or dict. Got {}".format(type(x).__name__))
    
    return json.loads(x.strip())


def resolve_log_level(lvl: (str, int)):
    
    if isinstance(lvl, int):
        return lvl
    
    level = logging.getLevelName(str(lvl).strip().upper())
    
    if not isinstance(level, int):
        raise ValueError("Unknown log level: '{}'".format(lvl))
    
    return level
