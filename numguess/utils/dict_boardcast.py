def dict_mean(dicts):
    # average every key shared by all dicts in `dicts`
    if not dicts:
        return {}

    keys = set(dicts[0])
    for d in dicts[1:]:
        keys &= set(d)

    return {k: sum(d[k] for d in dicts) / len(dicts) for k in sorted(keys)}
