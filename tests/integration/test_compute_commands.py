"""Integration tests for compute commands."""

from __future__ import annotations

import json

import httpx
import respx
from typer.testing import CliRunner

from mgc_sdk.app import app

runner = CliRunner()

API = "https://api.magalu.cloud/br-se1/compute/v1"
AUTH = ["--api-key", "test-key"]


def images(count: int, start: int = 0) -> dict:
    return {"images": [
        {"id": f"img-{i}", "name": f"image-{i}", "status": "active", "platform": "linux"}
        for i in range(start, start + count)
    ]}


class TestImageCommands:
    @respx.mock
    def test_list(self):
        route = respx.get(f"{API}/images").mock(return_value=httpx.Response(200, json=images(2)))
        result = runner.invoke(app, ["compute", "image", "list", "--limit", "2", *AUTH])
        assert result.exit_code == 0, result.output
        assert "img-1" in result.output
        request = route.calls.last.request
        assert dict(request.url.params) == {"_limit": "2"}
        assert request.headers["X-API-Key"] == "test-key"

    @respx.mock
    def test_list_json(self):
        respx.get(f"{API}/images").mock(return_value=httpx.Response(200, json=images(1)))
        result = runner.invoke(app, ["compute", "image", "list", "-f", "json", *AUTH])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["id"] == "img-0"

    @respx.mock
    def test_list_all_follows_pages(self):
        def handler(request: httpx.Request) -> httpx.Response:
            offset = int(request.url.params["_offset"])
            return httpx.Response(200, json=images(50 if offset == 0 else 3, start=offset))

        route = respx.get(f"{API}/images").mock(side_effect=handler)
        result = runner.invoke(
            app, ["compute", "image", "list", "--all", "--az", "br-se1-a", "-f", "json", *AUTH],
        )
        assert result.exit_code == 0
        assert len(json.loads(result.output)) == 53
        assert route.call_count == 2
        assert route.calls.last.request.url.params["availability-zone"] == "br-se1-a"

    @respx.mock
    def test_server_error_exit_code(self):
        respx.get(f"{API}/images").mock(return_value=httpx.Response(500, json={"message": "boom"}))
        result = runner.invoke(app, ["compute", "image", "list", *AUTH])
        assert result.exit_code == 10

    @respx.mock
    def test_auth_error_exit_code(self):
        respx.get(f"{API}/images").mock(return_value=httpx.Response(401))
        result = runner.invoke(app, ["compute", "image", "list", *AUTH])
        assert result.exit_code == 3

    @respx.mock
    def test_region_flag(self):
        route = respx.get("https://api.magalu.cloud/br-ne1/compute/v1/images").mock(
            return_value=httpx.Response(200, json=images(0)),
        )
        result = runner.invoke(app, ["compute", "image", "list", "--region", "br-ne1", *AUTH])
        assert result.exit_code == 0
        assert route.called


class TestCustomImageCommands:
    @respx.mock
    def test_create(self):
        route = respx.post(f"{API}/images/custom").mock(
            return_value=httpx.Response(200, json={"id": "8cf5c6d9-d5c5-4af9-bd1b-c17d032dc761"}),
        )
        result = runner.invoke(app, [
            "compute", "custom-image", "create", "my-image",
            "--url", "https://br-se1.magaluobjects.com/bucket/image.qcow2", *AUTH,
        ])
        assert result.exit_code == 0, result.output
        assert "8cf5c6d9-d5c5-4af9-bd1b-c17d032dc761" in result.output
        body = json.loads(route.calls.last.request.content)
        assert body["architecture"] == "x86/64"
        assert body["license"] == "unlicensed"

    @respx.mock
    def test_create_rejected(self):
        respx.post(f"{API}/images/custom").mock(
            return_value=httpx.Response(400, json={"message": "invalid architecture"}),
        )
        result = runner.invoke(app, [
            "compute", "custom-image", "create", "my-image",
            "--url", "https://x/image.qcow2", "--architecture", "arm64", *AUTH,
        ])
        assert result.exit_code == 7

    @respx.mock
    def test_show(self):
        respx.get(f"{API}/images/custom/ci-1").mock(
            return_value=httpx.Response(200, json={"id": "ci-1", "name": "golden", "status": "active"}),
        )
        result = runner.invoke(app, ["compute", "custom-image", "show", "ci-1", *AUTH])
        assert result.exit_code == 0
        assert "golden" in result.output

    @respx.mock
    def test_delete_force(self):
        route = respx.delete(f"{API}/images/custom/ci-1").mock(return_value=httpx.Response(204))
        result = runner.invoke(app, ["compute", "custom-image", "delete", "ci-1", "--force", *AUTH])
        assert result.exit_code == 0
        assert route.called

    @respx.mock
    def test_delete_cancelled(self):
        route = respx.delete(f"{API}/images/custom/ci-1").mock(return_value=httpx.Response(204))
        result = runner.invoke(app, ["compute", "custom-image", "delete", "ci-1", *AUTH], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert not route.called


class TestInstanceCommands:
    @respx.mock
    def test_list(self):
        route = respx.get(f"{API}/instances").mock(return_value=httpx.Response(200, json={
            "instances": [{
                "id": "vm-1", "name": "web-1", "status": "completed", "state": "running",
                "machine_type": {"id": "it-1", "name": "BV1-1-10"},
            }],
        }))
        result = runner.invoke(app, ["compute", "instance", "list", *AUTH])
        assert result.exit_code == 0
        assert "web-1" in result.output
        assert route.calls.last.request.url.params["expand"] == "machine-type,image"

    @respx.mock
    def test_show_not_found(self):
        respx.get(f"{API}/instances/vm-x").mock(return_value=httpx.Response(404))
        result = runner.invoke(app, ["compute", "instance", "show", "vm-x", *AUTH])
        assert result.exit_code == 4

    @respx.mock
    def test_start_stop(self):
        start = respx.post(f"{API}/instances/vm-1/start").mock(return_value=httpx.Response(204))
        stop = respx.post(f"{API}/instances/vm-1/stop").mock(return_value=httpx.Response(204))
        assert runner.invoke(app, ["compute", "instance", "start", "vm-1", *AUTH]).exit_code == 0
        assert runner.invoke(app, ["compute", "instance", "stop", "vm-1", *AUTH]).exit_code == 0
        assert start.called and stop.called

    @respx.mock
    def test_delete(self):
        route = respx.delete(f"{API}/instances/vm-1").mock(return_value=httpx.Response(204))
        result = runner.invoke(app, [
            "compute", "instance", "delete", "vm-1", "--delete-public-ip", "--force", *AUTH,
        ])
        assert result.exit_code == 0
        assert route.calls.last.request.url.params["delete_public_ip"] == "true"


class TestInstanceTypeAndSnapshotCommands:
    @respx.mock
    def test_instance_types(self):
        respx.get(f"{API}/instance-types").mock(return_value=httpx.Response(200, json={
            "instance_types": [{"id": "it-1", "name": "BV1-1-10", "vcpus": 1, "ram": 1024, "disk": 10}],
        }))
        result = runner.invoke(app, ["compute", "instance-type", "list", *AUTH])
        assert result.exit_code == 0
        assert "BV1-1-10" in result.output

    @respx.mock
    def test_snapshot_list(self):
        respx.get(f"{API}/snapshots").mock(return_value=httpx.Response(200, json={
            "snapshots": [{"id": "snap-1", "name": "nightly", "status": "completed", "state": "available"}],
        }))
        result = runner.invoke(app, ["compute", "snapshot", "list", "-f", "csv", *AUTH])
        assert result.exit_code == 0
        assert "snap-1,nightly" in result.output

    @respx.mock
    def test_snapshot_delete(self):
        route = respx.delete(f"{API}/snapshots/snap-1").mock(return_value=httpx.Response(204))
        result = runner.invoke(app, ["compute", "snapshot", "delete", "snap-1", "--force", *AUTH])
        assert result.exit_code == 0
        assert route.called


class TestGlobalOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("mgc ")

    @respx.mock
    def test_debug_logging(self):
        respx.get(f"{API}/images").mock(return_value=httpx.Response(200, json=images(0)))
        result = runner.invoke(app, ["--debug", "compute", "image", "list", *AUTH])
        assert result.exit_code == 0

    def test_missing_profile(self):
        result = runner.invoke(app, ["compute", "image", "list", "--profile", "ghost"])
        assert result.exit_code == 6
