__all__ = (
    'main',
)

import collections.abc
import logging
import pathlib

import click
import yaml
from jinja2 import Environment, FileSystemLoader

from . import parser
from ..model import LinearizationConflict, meta, new_class

log = logging.getLogger(__name__)

#---------------------------------------------------------------------------------------------------
# Raise an error pointing at the part of the input file being processed.
def fail(data, msg):
    raise click.ClickException(f'{msg} [{parser.location(data)}]')

def check_type(data, types, what):
    if not isinstance(data, types):
        fail(data, f'{what} must be a {types[0].__name__}, not {type(data).__name__}.')

#---------------------------------------------------------------------------------------------------
# Build the class records described by the "classes" mapping of a hierarchy file. Classes may only
# refer to bases defined before them.
def classes_from_yaml(hierarchy):
    check_type(hierarchy, (collections.abc.Mapping,), 'Hierarchy')
    entries = hierarchy.get('classes')
    check_type(entries, (collections.abc.Mapping,), 'Classes')

    classes = {}
    for name, entry in entries.items():
        if entry is None:
            entry = {}
        check_type(entry, (collections.abc.Mapping,), f'Class {name!r}')

        unknown = set(entry).difference(('bases', 'slots', 'fields'))
        if unknown:
            fail(entry, f'Unknown keys {sorted(unknown)!r} in class {name!r}.')

        bases = []
        for bname in entry.get('bases') or ():
            try:
                bases.append(classes[bname])
            except KeyError:
                fail(entry, f'Unknown base {bname!r} of class {name!r}.')

        definition = dict(entry.get('fields') or {})
        if entry.get('slots') is not None:
            definition['__slots__'] = list(entry['slots'])

        try:
            classes[name] = new_class(name, definition, *bases)
        except (LinearizationConflict, TypeError, ValueError) as e:
            fail(entry, str(e))

        log.debug(f'Loaded class {name!r} from {parser.location(entry)}.')

    return classes

#---------------------------------------------------------------------------------------------------
def describe(cls):
    data = meta.data_get(cls)
    return {
        'name': cls.__name__,
        'bases': [b.__name__ for b in cls.__bases__],
        'mro': [c.__name__ for c in cls.__mro__],
        'slots': None if data.allowed_fields is None else list(data.allowed_fields),
        'instance': repr(cls()),
    }

#---------------------------------------------------------------------------------------------------
@click.command()
@click.option('-i', '--include-dir', 'include_dirs',
              help="Directory searched for files referenced by !include tags",
              multiple=True,
              type=click.Path(exists=True, file_okay=False, resolve_path=True))
@click.option('-t', '--template-dir',
              help="Path to the templates",
              default=pathlib.Path(__file__).parent.absolute().joinpath('templates'),
              show_default=True,
              type=click.Path(exists=True, file_okay=False, resolve_path=True))
@click.option('-c', '--class', 'class_names',
              help="Only report the named class (may be repeated)",
              multiple=True)
@click.option('-f', '--format', 'format_',
              help="Format of the report",
              type=click.Choice(['text', 'yaml']),
              default='text',
              show_default=True)
@click.option('-o', '--output-file',
              help="Output file for the report",
              default="-",
              show_default=True,
              type=click.File('w'))
@click.option('--verbose',
              help="Log the construction of each class",
              is_flag=True,
              default=False)
@click.argument('yaml-file',
                type=click.File('r'))
def click_main(include_dirs, template_dir, class_names, format_, output_file, verbose, yaml_file):
    """Reads a class hierarchy described in a yaml file and reports the method resolution order of
    each class"""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        hierarchy = parser.load(yaml_file, include_dirs)
    except yaml.YAMLError as e:
        raise click.ClickException(str(e))

    classes = classes_from_yaml(hierarchy)
    if class_names:
        unknown = [n for n in class_names if n not in classes]
        if unknown:
            raise click.BadParameter(f'Unknown classes {unknown!r}.', param_hint='--class')
        classes = {n: classes[n] for n in class_names}

    report = [describe(cls) for cls in classes.values()]
    if format_ == 'yaml':
        yaml.safe_dump(report, output_file, sort_keys=False)
        return

    env = Environment(loader=FileSystemLoader(str(template_dir)),
                      trim_blocks=True, lstrip_blocks=True)
    output_file.write(env.get_template('mro.txt.j2').render(classes=report))

def main():
    click_main()

if __name__ == "__main__":
    main()
