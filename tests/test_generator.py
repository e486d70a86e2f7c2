"""
End-to-end tests for script generation against a fake release provider.
"""

import asyncio

import pytest

from conftest import FakeTransport, json_response
from dxsh.core.errors import (
    NoMatchingAsset,
    ProviderError,
    RateLimited,
    ReleaseNotFound,
    UnsupportedTool,
)
from dxsh.core.generator import generate_script
from dxsh.models.release import HttpResponse


class TestGenerateScript:

    def test_unsupported_tool_never_fetches(self, make_generator):
        transport = FakeTransport(json_response({"tag_name": "v1.0.0", "assets": []}))
        generator = make_generator(transport)

        with pytest.raises(UnsupportedTool, match="Tool 'unsupported-tool' is not supported"):
            asyncio.run(generator.generate("unsupported-tool"))

        assert transport.calls == []

    def test_kubectl_uses_url_template(self, make_generator):
        transport = FakeTransport(json_response({"tag_name": "v1.0.0", "assets": []}))

        script = asyncio.run(make_generator(transport).generate("kubectl"))

        assert "uname -s" in script
        assert "uname -m" in script
        assert "amd64" in script
        assert "arm64" in script
        assert "kubectl version --client" in script
        assert "https://dl.k8s.io/release/v1.0.0/bin/${OS}/${ARCH}/kubectl" in script
        assert transport.calls[0][0] == \
            "https://api.github.com/repos/kubernetes/kubernetes/releases/latest"

    def test_standard_tool_without_assets(self, make_generator):
        transport = FakeTransport(json_response({"tag_name": "v1.0.0", "assets": []}))

        with pytest.raises(NoMatchingAsset) as exc_info:
            asyncio.run(make_generator(transport).generate("docker-compose"))

        assert "No compatible binary found" in str(exc_info.value)
        assert "docker-compose-" in str(exc_info.value)

    def test_standard_tool_uses_first_matching_asset(self, make_generator, release_data):
        transport = FakeTransport(json_response(release_data))

        script = asyncio.run(make_generator(transport).generate("docker-compose"))

        assert 'curl -fsSL "https://example.com/docker-compose-linux-x86_64" ' \
               '-o "docker-compose-linux-x86_64"' in script
        assert 'mv "docker-compose-linux-x86_64" docker-compose' in script
        assert 'echo "Installing docker-compose v1.0.0..."' in script
        assert "darwin-aarch64" not in script

    def test_release_tag_cannot_inject_commands(self, make_generator, release_data):
        release_data["tag_name"] = 'v1$(touch /tmp/pwned)"'
        transport = FakeTransport(json_response(release_data))

        script = asyncio.run(make_generator(transport).generate("docker-compose"))

        assert 'echo "Installing docker-compose v1\\$(touch /tmp/pwned)\\"..."' in script
        assert "$(touch" not in script.replace("\\$(touch", "")

    def test_node_version_check(self, make_generator):
        release = {
            "tag_name": "v20.0.0",
            "assets": [{
                "name": "node-v20.0.0-linux-x64.tar.xz",
                "browser_download_url": "https://example.com/node-v20.0.0-linux-x64.tar.xz"
            }]
        }
        transport = FakeTransport(json_response(release))

        script = asyncio.run(make_generator(transport).generate("node"))

        assert 'tar -xJf "node-v20.0.0-linux-x64.tar.xz"' in script
        assert "\nnode --version\n" in script

    def test_identical_responses_give_identical_scripts(self, make_generator, release_data):
        first = asyncio.run(make_generator(FakeTransport(json_response(release_data)))
                            .generate("docker-compose"))
        second = asyncio.run(make_generator(FakeTransport(json_response(release_data)))
                             .generate("docker-compose"))

        assert first == second

    @pytest.mark.parametrize("response, error", [
        (HttpResponse(status=404, reason="Not Found"), ReleaseNotFound),
        (HttpResponse(status=403, headers={"X-RateLimit-Remaining": "0"}), RateLimited),
        (HttpResponse(status=502, reason="Bad Gateway"), ProviderError),
    ])
    def test_provider_errors_propagate(self, make_generator, response, error):
        with pytest.raises(error):
            asyncio.run(make_generator(FakeTransport(response)).generate("helm"))

    def test_module_level_entry_point(self, release_data):
        from dxsh.analyzers.github_analyzer import GitHubReleaseResolver

        resolver = GitHubReleaseResolver(transport=FakeTransport(json_response(release_data)))

        script = asyncio.run(generate_script("terraform", resolver=resolver))

        assert 'unzip -q "terraform_1.0.0_${OS}_${ARCH}.zip"' in script
        assert 'terraform --version || terraform version || echo "Version check not available"' in script
