"""Tests for the pg_installer public API surface."""

import pg_installer


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in pg_installer.__all__:
            assert getattr(pg_installer, name) is not None, name

    def test_core_names_exported(self):
        expected = {
            "ModuleInstaller",
            "InstalledPackage",
            "ModuleMap",
            "merge_config_file",
            "locate_config_file",
            "post_autoload_dump",
            "Config",
            "InstallerSettings",
            "InstallerError",
        }
        assert expected <= set(pg_installer.__all__)

    def test_version(self):
        assert isinstance(pg_installer.__version__, str)

    def test_discovery_package(self):
        from pg_installer.discovery import (
            extract_modules,
            find_module_packages,
            resolve_source_dirs,
            scan_source_files,
        )

        assert callable(extract_modules)
        assert callable(find_module_packages)
        assert callable(resolve_source_dirs)
        assert callable(scan_source_files)
