translations = {
    "stats_header": "=== STATISTICS ===",
    "total_files": "Total files found",
    "processed_files": "Processed files (filtered)",
    "duplicate_groups": "Duplicate groups",
    "total_space": "Total space processed",
    "duplicate_space": "Space taken by duplicates",
    "reclaimable_space": "Space that could be freed",
    "col_group": "GROUP",
    "col_size": "SIZE",
    "col_hash": "HASH",
    "col_file": "FILE",
    "no_duplicates": "No duplicate files found.",
    "saving_report": "Saving report to: {path}",
    "report_saved": "Report saved successfully.",
    "output_open_failed": "Could not create the output file. Showing report on screen.",
    "invalid_directory": "The directory does not exist or is not valid.",
    "traversal_failed": "Error while walking the directory: {error}",
    "dir_header": "=== DIRECTORIES WITH DUPLICATES ===",
    "dir_col_directory": "DIRECTORY",
    "dir_col_files": "FILES",
    "dir_col_groups": "GROUPS",
    "dir_col_size": "SIZE",
    "root_dir": "Root",
}
