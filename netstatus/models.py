from dataclasses import dataclass, field
from datetime import datetime

STATUS_ONLINE = 'online'
STATUS_OFFLINE = 'offline'


def format_rfc3339(moment):
    """Second-precision RFC 3339; a zero offset is written as Z"""
    text = moment.replace(microsecond=0).isoformat()
    if text.endswith('+00:00'):
        return text[:-6] + 'Z'
    return text


def rfc3339_now():
    return format_rfc3339(datetime.now().astimezone())


@dataclass(frozen=True)
class Device:
    ip: str
    hostname: str
    status: str = STATUS_OFFLINE
    last_seen: str = ''

    @classmethod
    def offline(cls, ip):
        return cls(ip=ip, hostname=ip)

    @property
    def is_online(self):
        return self.status == STATUS_ONLINE

    def to_dict(self):
        return {
            'ip': self.ip,
            'hostname': self.hostname,
            'status': self.status,
            'last_seen': self.last_seen,
        }


@dataclass(frozen=True)
class NetworkStatus:
    local_ip: str
    subnet: str
    devices: tuple = field(default_factory=tuple)

    @property
    def device_count(self):
        return len(self.devices)

    def to_dict(self):
        """Serialize with the devices kept in completion order"""
        return {
            'local_ip': self.local_ip,
            'subnet': self.subnet,
            'device_count': self.device_count,
            'devices': [device.to_dict() for device in self.devices],
        }
