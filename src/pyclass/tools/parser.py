#---------------------------------------------------------------------------------------------------
__all__ = (
    'load',
    'location',
)

import pathlib
import yaml

#---------------------------------------------------------------------------------------------------
# A mapping read from a hierarchy file. It remembers the position of its node in the source so that
# errors about a class entry can point at it.
class Located(dict):
    mark = None

def location(data):
    mark = getattr(data, 'mark', None)
    if mark is None:
        return '<unknown>'
    return f'{mark.name}, line: {mark.line + 1}, column: {mark.column + 1}'

#---------------------------------------------------------------------------------------------------
# Hierarchy files are plain YAML, with an !include tag for splitting the classes over several
# files. An included file must hold a mapping, which replaces the tagged node.
class Loader(yaml.SafeLoader):
    def __init__(self, stream, include_dirs=()):
        super().__init__(stream)

        # The directory of the file being read is searched before any given directories.
        dirs = [pathlib.Path(d) for d in include_dirs]
        name = getattr(stream, 'name', None)
        if isinstance(name, str) and not name.startswith('<'):
            dirs.insert(0, pathlib.Path(name).parent)
        self.include_dirs = tuple(dirs)

    def construct_located(self, node):
        data = Located(self.construct_mapping(node))
        data.mark = node.start_mark
        return data

    def find_include(self, node):
        name = self.construct_scalar(node)
        for d in self.include_dirs:
            path = d / name
            if path.is_file():
                return path

        searched = ', '.join(str(d) for d in self.include_dirs) or '<none>'
        raise yaml.MarkedYAMLError(
            None, None,
            f'Failed to find included file "{name}" in search directories: {searched}',
            node.start_mark)

    def construct_include(self, node):
        path = self.find_include(node)
        with path.open('r') as stream:
            data = load(stream, self.include_dirs)

        if not isinstance(data, Located):
            raise yaml.MarkedYAMLError(
                None, None,
                f'Included file "{path}" must hold a mapping, not {type(data).__name__}',
                node.start_mark)
        return data

Loader.add_constructor('tag:yaml.org,2002:map', Loader.construct_located)
Loader.add_constructor('!include', Loader.construct_include)

#---------------------------------------------------------------------------------------------------
def load(stream, include_dirs=()):
    loader = Loader(stream, include_dirs)
    try:
        return loader.get_single_data()
    finally:
        loader.dispose()
