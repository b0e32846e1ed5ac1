"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""


class ConvertUtils:
    @staticmethod
    def bytes_to_mb(size_bytes: int) -> str:
        """
        Convert bytes to a megabyte string with size-dependent precision:
        4 decimals below 0.01 MB, 3 below 0.1 MB, 2 otherwise.
        """
        mb = size_bytes / (1024 * 1024)
        if mb < 0.01:
            return f"{mb:.4f} MB"
        if mb < 0.1:
            return f"{mb:.3f} MB"
        return f"{mb:.2f} MB"

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to a compact human-readable string (e.g., 0 B, 1.5 KB, 3 MB).
        Trailing zeros are trimmed.
        """
        if size_bytes <= 0:
            return "0 B"

        units = ["B", "KB", "MB", "GB", "TB"]
        value = float(size_bytes)
        for unit in units:
            if value < 1024 or unit == units[-1]:
                break
            value /= 1024
        text = f"{value:.2f}".rstrip("0").rstrip(".")
        return f"{text} {unit}"
