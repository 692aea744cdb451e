class Registry(dict):
    def __init__(self, name):
        super(Registry, self).__init__()
        self.name = name

    def register(self, key=None):
        # usage: @BENCHMARKS.register("BinarySearch")
        def decorator(cls):
            name = cls.__name__ if key is None else key
            assert name not in self, f"{name} is already registered in {self.name}"
            self[name] = cls
            return cls

        return decorator

    def __missing__(self, key):
        raise KeyError(f"{key!r} is not registered in {self.name}, choose from {sorted(self)}")
