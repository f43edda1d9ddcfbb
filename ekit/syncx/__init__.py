"""Thread-safe map, object pool and atomic value."""