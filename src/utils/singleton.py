class Singleton:
    """
    Base class for the application's process-wide services.

    Subclasses are instantiated once per process and the instance is reused.
    Subclass __init__ methods must guard against re-running on repeated
    construction with their own "initialized" flag.
    """

    _instances = {}

    def __new__(cls, *args, **kwargs):
        if cls not in Singleton._instances:
            Singleton._instances[cls] = super(Singleton, cls).__new__(cls)
        return Singleton._instances[cls]

    def __init__(self, *args, **kwargs):
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        super().__init__()

    @classmethod
    def reset_instance(cls):
        """Drop the cached instance so the next construction builds a fresh one."""
        Singleton._instances.pop(cls, None)
