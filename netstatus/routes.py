from flask import Blueprint, render_template, jsonify, request, current_app
from flask_socketio import emit
from werkzeug.exceptions import HTTPException
import time

from netstatus import socketio
from netstatus.audit_log import write_log
from netstatus.exceptions import InvalidRequest, LocalAddressNotFound
from netstatus.models import Device, NetworkStatus, STATUS_ONLINE, rfc3339_now
from netstatus.scanner import get_local_ip, get_subnet

main = Blueprint('main', __name__)


def get_scanner():
    return current_app.extensions['network_scanner']


def error_response(message, status_code):
    return jsonify({'error': message}), status_code


@main.errorhandler(InvalidRequest)
def handle_invalid_request(e):
    write_log(f"Rejected {request.method} {request.path}: {e.message}")
    return error_response(e.message, e.status_code)


@main.app_errorhandler(HTTPException)
def handle_http_error(e):
    """Render HTTP errors as JSON instead of the default HTML page"""
    messages = {404: 'Not found', 405: 'Method not allowed', 500: 'Internal server error'}
    return error_response(messages.get(e.code, e.name), e.code)


@main.route('/')
def index():
    """HTML index page listing the API endpoints"""
    return render_template('index.html')


@main.route('/api/network/status')
def network_status():
    """Quick overview: the local address, its subnet and the local host itself"""
    try:
        local_ip = get_local_ip()
    except LocalAddressNotFound as e:
        write_log(f"Network status failed: {e}")
        return error_response('Failed to get local IP', 500)

    try:
        local_device = Device(
            ip=local_ip,
            hostname=get_scanner().lookup_hostname(local_ip),
            status=STATUS_ONLINE,
            last_seen=rfc3339_now(),
        )
        status = NetworkStatus(
            local_ip=local_ip,
            subnet=get_subnet(local_ip),
            devices=(local_device,),
        )
        write_log(f"Network status requested: {local_ip}")
        return jsonify(status.to_dict())
    except Exception as e:
        print(f"Network status error: {e}")
        return error_response('Internal server error', 500)


@main.route('/api/network/scan')
def network_scan():
    """Probe the scan window of the local subnet and list the hosts that respond"""
    try:
        local_ip = get_local_ip()
    except LocalAddressNotFound as e:
        write_log(f"Network scan failed: {e}")
        return error_response('Failed to get local IP', 500)

    try:
        subnet = get_subnet(local_ip)
        socketio.emit('scan_started', {'message': 'Network scan started', 'subnet': subnet})

        start_time = time.time()
        devices = get_scanner().scan_network(local_ip)
        scan_duration = time.time() - start_time

        socketio.emit('scan_completed', {
            'message': 'Network scan completed',
            'devices_found': len(devices),
            'duration': scan_duration
        })
        write_log(f"Network scan of {subnet}: {len(devices)} devices found in {scan_duration:.2f} seconds")

        status = NetworkStatus(local_ip=local_ip, subnet=subnet, devices=tuple(devices))
        return jsonify(status.to_dict())
    except Exception as e:
        print(f"Scan error: {e}")
        return error_response('Internal server error', 500)


def parse_ping_request():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest('Invalid request body')
    ip = data.get('ip')
    if ip is not None and not isinstance(ip, str):
        raise InvalidRequest('Invalid request body')
    if not ip:
        raise InvalidRequest('IP address is required')
    return ip


@main.route('/api/device/ping', methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'])
def device_ping():
    """Probe a single address given as JSON {"ip": "..."}"""
    if request.method != 'POST':
        raise InvalidRequest('Method not allowed', status_code=405)

    ip = parse_ping_request()
    device = get_scanner().ping_device(ip)
    write_log(f"Ping {ip}: {device.status}")
    return jsonify(device.to_dict())


# WebSocket events
def handle_connect():
    """Handle client connection"""
    print('Client connected')
    emit('connected', {'message': 'Connected to network status API'})
