from novadesk.iot import IotDevice


def test_registered_device_is_online():
    device = IotDevice("Lamp", "Matter")
    assert device.online is True
    assert device.status_line() == "[IoT] Device 'Lamp' protocol Matter status: online"


def test_offline_status():
    device = IotDevice("Sensor", "Thread")
    device.online = False
    assert device.status_line().endswith("status: offline")


def test_registration_is_printed(capsys):
    IotDevice("Hub", "Home Assistant")
    out = capsys.readouterr().out
    assert "[IoT] Registered device 'Hub' with protocol Home Assistant" in out


def test_long_fields_are_truncated():
    device = IotDevice("n" * 100, "p" * 100)
    assert len(device.name) == 63
    assert len(device.protocol) == 31