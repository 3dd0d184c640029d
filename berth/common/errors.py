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

"""Module for the errors raised by Berth

Every error can describe itself, and the exception that caused it, as a dict
(see PrettyError.pretty), which is what gets written to the logs.
"""


class PrettyError(Exception):
    
    @staticmethod
    def describe(exc: Exception) -> dict:
        
        dyct = {'Error': exc.__class__.__name__}
        message = str(exc)
        cause = exc.__cause__
        
        if isinstance(cause, PrettyError):
            dyct['cause'] = cause.pretty()
        elif cause is not None:
            dyct['cause'] = '{}: {}'.format(cause.__class__.__name__, cause)
        
        if message:
            dyct['Message'] = message
        
        return dyct
    
    def pretty(self):
        
        return self.describe(self)
    
    def __str__(self):
        
        return '; '.join(str(arg) for arg in self.args)


class EngineError(PrettyError):
    
    """Base class for failures reported while talking to a Docker engine"""
    
    def __init__(self, *args, host: str = None):
        
        super().__init__(*args)
        self.host = host
    
    def pretty(self):
        
        dyct = super().pretty()
        
        if self.host is not None:
            dyct['Host'] = self.host
        
        return dyct


class EngineConnectionError(EngineError, ConnectionError):
    
    """The engine could not be reached, refused the handshake or timed out"""


class RemoteAPIError(EngineError):
    
    """The engine answered with a non-success status"""
    
    def __init__(self, *args, host: str = None, status_code: int = None, explanation: str = None):
        
        super().__init__(*args, host=host)
        self.status_code = status_code
        self.explanation = explanation
    
    def pretty(self):
        
        dyct = super().pretty()
        
        if self.status_code is not None:
            dyct['Status'] = self.status_code
        
        return dyct


class RemoteNotFoundError(RemoteAPIError):
    
    pass


class ConfigurationError(PrettyError):
    
    pass
