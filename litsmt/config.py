# Copyright 2018 Stanford University
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import argparse
from collections import namedtuple
import configparser
from pathlib import Path
from typing import Any, Callable, Dict, List, NamedTuple, Sequence

GENERAL = "GENERAL"
FILE_SP = ","

def file_list(value)->List[str]:
    if isinstance(value, str):
        return [f.strip() for f in value.split(FILE_SP) if f.strip()]
    files = []
    for v in value:
        files += file_list(v)
    return files

def _is_unset(value)->bool:
    return (value is None) or (value == [])


class LitSMTArgGroup(argparse._ArgumentGroup):
    def __init__(self, container, group, *args, **kwargs):
        self._config_files = container._config_files
        self._defaults = container._defaults
        self._types = container._types
        self._add_long_option = container._add_long_option
        argparse._ArgumentGroup.__init__(self, container, group, *args, **kwargs)

    def add_argument(self, *args, default=None, action=None,
                     dest:str=None, is_config_file:bool=False,
                     type:Callable=str, **kwargs):
        option_name = self._add_long_option(args, dest)
        if is_config_file:
            self._config_files.add(option_name)
        if dest is None and args[0].startswith('-'):
            dest = option_name
        # save the default (if not already set)
        if option_name not in self._defaults:
            self._defaults[option_name] = default
        if option_name not in self._types:
            if action == 'store_true':
                self._types[option_name] = bool
            else:
                self._types[option_name] = type
        # always set argparse's default to None so that we can identify
        #  unset arguments
        if dest is None:
            super().add_argument(*args, default=None, action=action, **kwargs)
        else:
            super().add_argument(*args, default=None, dest=dest, action=action, **kwargs)


class LitSMTArgParser(argparse.ArgumentParser):
    '''
    The LitSMTArgParser extends argparse.ArgumentParser so that every option
    can also be set in the [GENERAL] section of a configuration file.

    Priority order: command line argument > configuration file > built in default
    '''
    def __init__(self, *args, **kwargs):
        self._config_files = set()
        self._defaults = dict()
        self._types = dict()
        self._options = []
        argparse.ArgumentParser.__init__(self, *args, **kwargs)

    def add_general_group(self, group_str:str, *args, **kwargs)->LitSMTArgGroup:
        group = LitSMTArgGroup(self, group_str, *args, **kwargs)
        self._action_groups.append(group)
        return group

    def _add_long_option(self, options:Sequence[str], dest:str)->str:
        '''
        Identify the long version of the option
        '''
        assert len(options) >= 1, "Expecting at least one option"

        if dest is not None:
            option = dest
        else:
            long_options = []
            for o in options:
                if len(o) > 1 and o[:2] == '--':
                    long_options.append(o[2:].replace('-', '_'))
            assert len(long_options) <= 1, "Expecting at most one long option"

            option = long_options[0] if long_options else next(iter(options))

        assert option not in self._options, "Option %s declared twice"%option
        self._options.append(option)
        return option

    def set_defaults(self, **kwargs):
        for k, v in kwargs.items():
            self._defaults[k] = v

    def get_default_config(self, **kwargs)->NamedTuple:
        '''
        Returns the configuration with the built in defaults, which can be
        overriden with keyword arguments
        '''
        unknown_options = kwargs.keys() - set(self._options)
        if unknown_options:
            raise RuntimeError("Expecting only known options but got {}.\n"
                               "Options include:\n\t{}".format(unknown_options, '\n\t'.join(self._options)))

        options = dict()
        for option in self._options:
            options[option] = kwargs[option] if option in kwargs else self._defaults[option]

        return self._make_config(self._convert_types(options, "keyword arguments"))

    def parse_args(self, args=None)->NamedTuple:
        command_line_args = vars(super().parse_args(args))

        config_files = [command_line_args[c] for c in self._config_files if command_line_args[c] is not None]
        assert len(config_files) <= 1, "Expecting only a single configuration file"

        file_options = dict()
        if config_files:
            file_options = self.read_config_file(config_files[0])

        options = dict()
        for option in self._options:
            if not _is_unset(command_line_args[option]):
                options[option] = command_line_args[option]
            elif option in file_options:
                options[option] = file_options[option]
            else:
                options[option] = self._defaults[option]

        return self._make_config(self._convert_types(options, "command line"))

    def parse_config(self, config_file:Path)->configparser.ConfigParser:
        parser = configparser.ConfigParser()
        parser.optionxform=str

        with config_file.open("r") as f:
            parser.read_string(f.read())

        return parser

    def read_config_file(self, config_file:str)->Dict[str, Any]:
        config_args = self.parse_config(Path(config_file))

        if GENERAL not in config_args:
            raise RuntimeError("Expecting a [{}] section in {}".format(GENERAL, config_file))

        options = dict(config_args[GENERAL])
        unknown_options = (options.keys() - set(self._options)) | (options.keys() & self._config_files)
        if unknown_options:
            raise RuntimeError("Unknown options {} in section [{}] of {}".format(unknown_options, GENERAL, config_file))

        return self._convert_types(options, config_file)

    def _convert_types(self, options:Dict[str, Any], origin:str)->Dict[str, Any]:
        for k, v in options.items():
            if v is None:
                continue
            assert k in self._types, "Expecting to have (at least default) type info for every option"
            try:
                # handle the 'False' case, note that bool('False') evaluates to True
                if self._types[k] == bool and isinstance(v, str):
                    if v == 'True':
                        options[k] = True
                    elif v == 'False':
                        options[k] = False
                    else:
                        raise RuntimeError("Expecting True or False as an option for {} but got {} in {}".format(k, v, origin))
                else:
                    options[k] = self._types[k](v)
            except ValueError:
                raise ValueError("Cannot convert '{}' to expected type {} in {}".format(v, self._types[k], origin))
        return options

    def _make_config(self, options:Dict[str, Any])->NamedTuple:
        # sorting keeps everything deterministic
        fields = sorted(options.keys())
        return namedtuple('general_config', fields)(**options)
