import threading


class Singleton(type):
    _instances = {}
    _lock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    @classmethod
    def clear(mcs, cls=None) -> None:
        # drop cached instances so the next call re-initializes
        if cls is None:
            mcs._instances.clear()
        else:
            mcs._instances.pop(cls, None)
