from .usage_file import UsageFile, check_version, load_from_file, parse_usage_file, parse_yaml

__all__ = ["UsageFile", "check_version", "load_from_file", "parse_usage_file", "parse_yaml"]
