import yaml


class FlowStyleList(list):
        pass


def represent_flow_style_list(dumper, data):
        return dumper.represent_sequence('tag:yaml.org,2002:seq', data, flow_style=True)


def dump_manifest(manifest: dict, stream=None):
        return yaml.dump(manifest, stream, sort_keys=False)


yaml.add_representer(FlowStyleList, represent_flow_style_list)
