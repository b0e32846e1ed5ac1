translations = {
    "stats_header": "=== ESTADÍSTICAS ===",
    "total_files": "Archivos totales encontrados",
    "processed_files": "Archivos procesados (filtrados)",
    "duplicate_groups": "Grupos de duplicados",
    "total_space": "Espacio total procesado",
    "duplicate_space": "Espacio ocupado por duplicados",
    "reclaimable_space": "Espacio que se podría liberar",
    "col_group": "GRUPO",
    "col_size": "TAMAÑO",
    "col_hash": "HASH",
    "col_file": "ARCHIVO",
    "no_duplicates": "No se encontraron archivos duplicados.",
    "saving_report": "Guardando reporte en: {path}",
    "report_saved": "Reporte guardado exitosamente.",
    "output_open_failed": "No se pudo crear el archivo de salida. Mostrando en pantalla.",
    "invalid_directory": "El directorio no existe o no es válido.",
    "traversal_failed": "Error al recorrer el directorio: {error}",
    "dir_header": "=== DIRECTORIOS CON DUPLICADOS ===",
    "dir_col_directory": "DIRECTORIO",
    "dir_col_files": "ARCHIVOS",
    "dir_col_groups": "GRUPOS",
    "dir_col_size": "TAMAÑO",
    "root_dir": "Raíz",
}
