from dupfinder.core.models import DirectorySortOrder, HashAlgorithmName

ALGORITHM_ALIASES = {
    "dual": HashAlgorithmName.DUAL,
    "xxh128": HashAlgorithmName.XXH128,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content hash used to group files:\n"
    "  dual    : FNV-1a 64 + DJB 64 accumulators (default)\n"
    "  xxh128  : xxHash3 128-bit\n"
)

DIRECTORY_SORT_ALIASES = {
    "name": DirectorySortOrder.NAME,
    "count": DirectorySortOrder.COUNT,
    "size": DirectorySortOrder.SIZE,
}

DIRECTORY_SORT_CHOICES = list(DIRECTORY_SORT_ALIASES.keys())

DIRECTORY_SORT_HELP_TEXT = (
    "Append a per-directory summary of duplicate files, sorted by:\n"
    "  name   : directory path\n"
    "  count  : number of duplicate files (most first)\n"
    "  size   : bytes held by duplicate files (largest first)\n"
)

FORMAT_CHOICES = ["table", "json"]

EPILOG_TEXT = """
Examples:
  Find duplicates in a home directory
  %(prog)s /home/user

  Only compare pictures
  %(prog)s /home/user --ext .jpg,.png

  Save the report to a file
  %(prog)s /home/user --output report.txt

  Confirm every group byte by byte and show which directories hold the copies
  %(prog)s /home/user --verify --by-directory size
"""
