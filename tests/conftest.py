# -*- coding: utf-8 -*-

"""
Pytest configuration and fixtures for Berth tests.
"""

import socket
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import MagicMock, patch

import pytest
import requests

from berth.bay.captain import DockerCaptain
from berth.bay.compass import DockerCompass
from berth.bay.harbor import Harbor, PoolSpec
from berth.common.constants import EnvVar
from berth.common.logging import LOG


@pytest.fixture(scope='session', autouse=True)
def log_dir(tmp_path_factory):
    
    """Keeps test logs away from the user's home directory"""
    
    path = tmp_path_factory.mktemp('logs')
    LOG.kwargs['directory'] = str(path)
    return path


@pytest.fixture(autouse=True)
def no_host_override(monkeypatch):
    
    monkeypatch.delenv(EnvVar.DOCKER_HOST, raising=False)


@pytest.fixture
def compass():
    
    return DockerCompass(custom_conf={
        'daemon_address': 'tcp://{}:2375',
        'api_version': '1.41'
    })


@pytest.fixture
def pool_spec():
    
    return PoolSpec(
        max_total_connections=20,
        max_per_route_connections=5,
        connect_timeout=2,
        read_timeout=3
    )


@pytest.fixture
def harbor(pool_spec, compass):
    
    harbor = Harbor(pool_spec=pool_spec, compass=compass)
    yield harbor
    harbor.close()


@pytest.fixture
def api():
    
    """Mock of the low level engine client returned for every host"""
    
    api = MagicMock(name='APIClient')
    api.create_host_config.side_effect = lambda **kwargs: dict(
        NetworkMode=kwargs.get('network_mode'),
        Binds=kwargs.get('binds')
    )
    api.create_container.return_value = {'Id': 'f00dcafe', 'Warnings': []}
    return api


@pytest.fixture
def api_cls(api):
    
    with patch('berth.bay.harbor.docker.APIClient', return_value=api) as api_cls:
        yield api_cls


@pytest.fixture
def captain(harbor, api_cls):
    
    return DockerCaptain(harbor)


@pytest.fixture
def engine_response():
    
    """Builds the HTTP response an engine error is raised from"""
    
    def make(status_code: int, reason: str = None):
        
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response.url = 'http://10.0.0.1:2375/v1.41/containers/create'
        return response
    
    return make


@pytest.fixture
def local_captain():
    
    """Builds a captain with real engine clients, pointed at a port on 127.0.0.1"""
    
    harbors = []
    
    def make(port: int, pool_spec: PoolSpec):
        
        compass = DockerCompass(custom_conf={
            'daemon_address': 'tcp://{}:' + str(port),
            'api_version': '1.41'
        })
        harbor = Harbor(pool_spec=pool_spec, compass=compass)
        harbors.append(harbor)
        return DockerCaptain(harbor)
    
    yield make
    
    for harbor in harbors:
        harbor.close()


@pytest.fixture
def busy_engine():
    
    """Local HTTP server that answers every request with an empty JSON object after a short delay
    
    server.stats keeps how many requests were served and the most that were in progress at once.
    """
    
    lock = threading.Lock()
    stats = {'active': 0, 'peak': 0, 'served': 0}
    
    class Handler(BaseHTTPRequestHandler):
        
        protocol_version = 'HTTP/1.1'
        
        def do_GET(self):
            
            with lock:
                stats['active'] += 1
                stats['peak'] = max(stats['peak'], stats['active'])
            
            time.sleep(0.2)
            
            with lock:
                stats['active'] -= 1
                stats['served'] += 1
            
            body = b'{}'
            self.send_response(200)
            self.send_header('Content-Type', 'application/json')
            self.send_header('Content-Length', str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        
        def log_message(self, *args):
            
            pass
    
    server = ThreadingHTTPServer(('127.0.0.1', 0), Handler)
    server.daemon_threads = True
    server.stats = stats
    threading.Thread(target=server.serve_forever, daemon=True).start()
    
    yield server
    
    server.shutdown()
    server.server_close()


@pytest.fixture
def silent_engine():
    
    """Port of a socket that accepts connections (through the kernel backlog) and never answers"""
    
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    sock.listen(8)
    
    yield sock.getsockname()[1]
    
    sock.close()


@pytest.fixture
def stalled_engine():
    
    """Port of a server that starts a chunked response to the first request, then stops sending"""
    
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    sock.listen(8)
    done = threading.Event()
    
    def serve():
        
        conn, _ = sock.accept()
        request = b''
        
        while b'\r\n\r\n' not in request:
            chunk = conn.recv(4096)
            
            if not chunk:
                break
            
            request += chunk
        
        conn.sendall(
            b'HTTP/1.1 200 OK\r\n'
            b'Content-Type: application/json\r\n'
            b'Transfer-Encoding: chunked\r\n\r\n'
        )
        done.wait(10)
        conn.close()
    
    threading.Thread(target=serve, daemon=True).start()
    
    yield sock.getsockname()[1]
    
    done.set()
    sock.close()
