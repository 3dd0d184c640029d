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

"""Module for Berth's own log file

Records go to a rotating file (~/.berth/logs/berth.log unless configured otherwise).
The file handler is only created the first time something is logged, so importing
Berth never touches the filesystem.
"""

import logging
import pathlib
from logging.handlers import RotatingFileHandler

from berth.common.constants import DateFmt, LoggerConst


class Logger(object):
    
    def __init__(self, name: str = LoggerConst.DEFAULT_NAME, **kwargs):
        
        self.name = name
        self.kwargs = kwargs  # overrides for the logger configuration namespace
        self.kwargs['name'] = name
        self.path = None
        self._logger = None
    
    def setup(self) -> logging.Logger:
        
        if self._logger is not None:
            return self._logger
        
        from berth.bay.compass import LoggerCompass  # avoiding circular import
        
        compass = LoggerCompass(custom_conf=self.kwargs)
        logger = logging.getLogger(self.name)
        logger.setLevel(compass.lvl)
        logger.propagate = compass.join_root
        self.path = compass.path_to_log_file
        
        if not logger.handlers:
            pathlib.Path(compass.log_file_dir).mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(**compass.file_handler_kwargs)
            handler.setFormatter(logging.Formatter(LoggerConst.FORMAT, DateFmt.READABLE))
            logger.addHandler(handler)
        
        self._logger = logger
        return logger
    
    def log(self, lvl: int, msg):
        
        self.setup().log(lvl, msg)
    
    def debug(self, msg):
        
        self.log(logging.DEBUG, msg)
    
    def info(self, msg):
        
        self.log(logging.INFO, msg)
    
    def warning(self, msg):
        
        self.log(logging.WARNING, msg)
    
    def error(self, msg):
        
        self.log(logging.ERROR, msg)


LOG = Logger()


class Logged(object):
    
    def __init__(self, log: Logger = None):
        
        assert log is None or isinstance(log, Logger)
        self.LOG = log or LOG
