from netstatus.models import Device, STATUS_ONLINE


def online_device(ip):
    return Device(ip=ip, hostname=f"host-{ip.split('.')[-1]}", status=STATUS_ONLINE,
                  last_seen='2026-10-19T12:00:00+00:00')
