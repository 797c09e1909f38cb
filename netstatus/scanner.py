import socket
import ipaddress
import threading
import time

import psutil

from config import Config as conf
from netstatus.exceptions import LocalAddressNotFound
from netstatus.models import Device, STATUS_ONLINE, rfc3339_now


def get_local_ip():
    """Return the first non-loopback IPv4 address found on a local interface"""
    for addrs in psutil.net_if_addrs().values():
        for addr in addrs:
            if addr.family != socket.AF_INET or not addr.address:
                continue
            try:
                ip_obj = ipaddress.IPv4Address(addr.address)
            except ipaddress.AddressValueError:
                continue
            if not ip_obj.is_loopback:
                return str(ip_obj)
    raise LocalAddressNotFound()


def _octets(ip):
    parts = ip.split('.')
    if len(parts) != 4:
        return None
    return parts


def get_subnet(ip):
    """'a.b.c.d' -> 'a.b.c.0/24', or '' when ip is not four dotted parts"""
    parts = _octets(ip)
    if parts is None:
        return ''
    return f"{parts[0]}.{parts[1]}.{parts[2]}.0/24"


class NetworkScanner:
    def __init__(self, window=conf.SCAN_WINDOW, timeout=conf.PROBE_TIMEOUT,
                 tcp_port=conf.TCP_PROBE_PORT, udp_port=conf.UDP_PROBE_PORT,
                 max_threads=conf.MAX_PING_THREADS):
        self.window = window
        self.timeout = timeout
        self.tcp_port = tcp_port
        self.udp_port = udp_port
        self.max_threads = max_threads
        self.scan_lock = threading.Lock()

    @classmethod
    def from_config(cls, config):
        return cls(
            window=config.get('SCAN_WINDOW', conf.SCAN_WINDOW),
            timeout=config.get('PROBE_TIMEOUT', conf.PROBE_TIMEOUT),
            tcp_port=config.get('TCP_PROBE_PORT', conf.TCP_PROBE_PORT),
            udp_port=config.get('UDP_PROBE_PORT', conf.UDP_PROBE_PORT),
            max_threads=config.get('MAX_PING_THREADS', conf.MAX_PING_THREADS),
        )

    def scan_targets(self, local_ip):
        """Candidate addresses: the /24 prefix of local_ip with host octets 1..window"""
        parts = _octets(local_ip)
        if parts is None:
            return []
        base_ip = '.'.join(parts[:3])
        return [f"{base_ip}.{i}" for i in range(1, self.window + 1)]

    def _tcp_probe(self, ip):
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        try:
            return sock.connect_ex((ip, self.tcp_port)) == 0
        except (OSError, ValueError):
            return False
        finally:
            sock.close()

    def _udp_probe(self, ip):
        # A connected datagram socket only proves the local stack accepted the
        # destination; the remote host is never asked to answer.
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        sock.settimeout(self.timeout)
        try:
            sock.connect((ip, self.udp_port))
            return True
        except (OSError, ValueError):
            return False
        finally:
            sock.close()

    def lookup_hostname(self, ip):
        """Reverse lookup; not bounded by the probe timeout"""
        try:
            return socket.gethostbyaddr(ip)[0] or ip
        except (OSError, ValueError):
            return ip

    def ping_device(self, ip):
        """Probe a single address over TCP, falling back to UDP, and return a Device"""
        if self._tcp_probe(ip) or self._udp_probe(ip):
            last_seen = rfc3339_now()
            return Device(
                ip=ip,
                hostname=self.lookup_hostname(ip),
                status=STATUS_ONLINE,
                last_seen=last_seen,
            )
        return Device.offline(ip)

    def scan_network(self, local_ip):
        """Probe every address in the scan window concurrently and return the online ones"""
        targets = self.scan_targets(local_ip)
        if not targets:
            return []

        print(f"Starting network scan of {targets[0]}-{targets[-1]}...")
        start_time = time.time()

        active_devices = []
        threads = []

        def ping_host(ip):
            device = self.ping_device(ip)
            if device.is_online:
                with self.scan_lock:
                    active_devices.append(device)

        for ip in targets:
            thread = threading.Thread(target=ping_host, args=(ip,))
            threads.append(thread)
            thread.start()

            if len(threads) >= self.max_threads:
                for t in threads:
                    t.join()
                threads = []

        for thread in threads:
            thread.join()

        scan_duration = time.time() - start_time
        print(f"Scan completed in {scan_duration:.2f} seconds. Found {len(active_devices)} devices.")
        return active_devices
