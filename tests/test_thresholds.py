"""
Tests for threshold evaluation. Every comparison includes its boundary.
"""

from dataclasses import replace

from agent.models import DiskSnapshot
from agent.thresholds import evaluate


def _disk(drive, free_gb):
    return DiskSnapshot(drive=drive, size_gb=100.0, used_gb=100.0 - free_gb,
                        free_gb=free_gb, percent_used=100.0 - free_gb)


def test_quiet_sample_raises_nothing(make_sample, config):
    sample = make_sample(cpu=10, mem_pct=40, disks=[_disk("C:", 50.0)], net=1.0)
    assert evaluate(sample, config) == []


def test_cpu_boundary_is_inclusive(make_sample, config):
    cfg = replace(config, cpu_warn=90)
    disks = [_disk("C:", 50.0)]

    alerts = evaluate(make_sample(cpu=90, disks=disks), cfg)
    assert len(alerts) == 1
    assert "CPU" in alerts[0]

    assert evaluate(make_sample(cpu=89, disks=disks), cfg) == []


def test_memory_boundary_is_inclusive(make_sample, config):
    cfg = replace(config, mem_warn=80)
    disks = [_disk("C:", 50.0)]
    assert len(evaluate(make_sample(mem_pct=80.0, disks=disks), cfg)) == 1
    assert evaluate(make_sample(mem_pct=79.99, disks=disks), cfg) == []


def test_disk_exactly_at_free_threshold_alerts(make_sample, config):
    cfg = replace(config, disk_free_warn_gb=5)
    alerts = evaluate(make_sample(disks=[_disk("C:", 5.00)]), cfg)
    assert alerts == ["Low disk space on C: (5GB free, threshold 5GB)"]


def test_each_low_disk_alerts_independently(make_sample, config):
    cfg = replace(config, disk_free_warn_gb=5)
    disks = [_disk("C:", 1.5), _disk("D:", 40.0), _disk("E:", 4.99)]
    alerts = evaluate(make_sample(disks=disks), cfg)
    assert len(alerts) == 2
    assert "C:" in alerts[0]
    assert "E:" in alerts[1]


def test_network_boundary_is_inclusive(make_sample, config):
    cfg = replace(config, net_warn_mbps=100)
    disks = [_disk("C:", 50.0)]
    assert len(evaluate(make_sample(net=100.0, disks=disks), cfg)) == 1
    assert evaluate(make_sample(net=99.99, disks=disks), cfg) == []


def test_alert_order_cpu_memory_disks_network(make_sample, config):
    cfg = replace(config, cpu_warn=1, mem_warn=1, disk_free_warn_gb=100, net_warn_mbps=0)
    alerts = evaluate(make_sample(), cfg)
    assert len(alerts) == 5
    assert alerts[0].startswith("High CPU")
    assert alerts[1].startswith("High memory")
    assert "C:" in alerts[2]
    assert "D:" in alerts[3]
    assert alerts[4].startswith("High network")
