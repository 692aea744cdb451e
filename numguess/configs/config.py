import ast
from copy import deepcopy
from itertools import chain
import json


def _convert(value, current):
    if not isinstance(value, str):
        return value

    if current is None:
        # no default to follow, e.g. MAX_STEP=None: read "5" as 5, "None" as None
        try:
            return ast.literal_eval(value)
        except (ValueError, SyntaxError):
            return value

    if isinstance(current, bool):
        return value.lower() in ("1", "true", "yes")

    return type(current)(value)


class Config(dict):
    def __init__(self, __map_or_iterable=None, **kwargs):
        if __map_or_iterable is None:
            d = {}
        else:
            d = dict(__map_or_iterable)

        if kwargs:
            d.update(**kwargs)

        for k, v in d.items():
            setattr(self, k, v)

    def __setattr__(self, __name, __value):
        if isinstance(__value, (list, tuple)):
            __value = [self.__class__(**x) if isinstance(x, dict) else x
                       for x in __value]
        elif isinstance(__value, dict) and not isinstance(__value, self.__class__):
            __value = self.__class__(**__value)

        super(Config, self).__setattr__(__name, __value)
        super(Config, self).__setitem__(__name, __value)

    __setitem__ = __setattr__

    def __delattr__(self, __name):
        super(Config, self).__delattr__(__name)
        super(Config, self).__delitem__(__name)

    __delitem__ = __delattr__

    def update(self, __map_or_iterable=None, **kwargs):
        __d = self.__class__(__map_or_iterable)

        for k, v in chain(__d.items(), kwargs.items()):
            if isinstance(getattr(self, k, None), self.__class__) and isinstance(v, dict):
                getattr(self, k).update(v)
            else:
                setattr(self, k, v)

    def update_not_recursive(self, __map_or_iterable=None, **kwargs):
        __d = self.__class__(__map_or_iterable)

        for k, v in chain(__d.items(), kwargs.items()):
            setattr(self, k, v)

    def pop(self, __key, *default):
        if __key not in self:
            if default:
                return default[0]
            raise KeyError(__key)

        value = self[__key]
        delattr(self, __key)
        return value

    def __deepcopy__(self, memo):
        return self.__class__({k: deepcopy(v, memo) for k, v in self.items()})

    def __str__(self):
        return json.dumps(self, indent=" " * 4)

    def update_from_list(self, items, auto_type_conversion=True):
        # `items`: iterable of ("GROUP.KEY", value) pairs, e.g. parsed "--opts"
        for key, value in items:
            single_keys = key.split(".")

            obj = self
            for single_key in single_keys[:-1]:
                obj = obj[single_key]

            current = obj.get(single_keys[-1])
            if auto_type_conversion:
                value = _convert(value, current)

            obj[single_keys[-1]] = value
