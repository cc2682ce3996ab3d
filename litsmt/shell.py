#!/usr/bin/env python3

# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from multiprocessing import Pool
import os
import sys
from typing import NamedTuple, Optional, Tuple

from litsmt.encoders.litmus import LitmusParser
from litsmt.exceptions import LitSMTError
from litsmt.options import litsmt_option_manager
from litsmt.printers.record import TOMLRecordPrinter
from litsmt.translator import translate_to_string
from litsmt.utils.generic import class_name, file_basename
from litsmt.utils.logger import Logger

NL = "\n"

def translate_file(strfile:str)->str:
    test = LitmusParser().parse_file(strfile)
    return translate_to_string(test)

def translation_job(strfile:str)->Tuple[str, Optional[str], Optional[str]]:
    '''
    Translates one file, returns (file, record, None) or (file, None, error)
    '''
    try:
        return (strfile, translate_file(strfile), None)
    except (LitSMTError, OSError) as e:
        return (strfile, None, "%s (%s)"%(e, class_name(e)))

def run_jobs(inputs, processes:int, keep_going:bool):
    if processes > 1 and len(inputs) > 1:
        timer = Logger.start_timer("Translation of %d test(s) with %d processes"%(len(inputs), processes))
        with Pool(processes) as pool:
            results = pool.map(translation_job, inputs)
        Logger.get_timer(timer)
        return results

    results = []
    for strfile in inputs:
        timer = Logger.start_timer("Translation of \"%s\""%strfile)
        result = translation_job(strfile)
        Logger.get_timer(timer)
        results.append(result)
        if (result[2] is not None) and not keep_going:
            break
    return results

def record_file(strfile:str, output_dir:str)->str:
    return os.path.join(output_dir, file_basename(strfile)+TOMLRecordPrinter.EXT)

def check_record_files(inputs, output_dir:str):
    outfiles = {}
    for strfile in inputs:
        outfile = record_file(strfile, output_dir)
        if outfile in outfiles:
            Logger.error("\"%s\" and \"%s\" would both be saved in \"%s\""%(outfiles[outfile], strfile, outfile), raise_exception=False)
        outfiles[outfile] = strfile

def write_record(record:str, strfile:str, config:NamedTuple, stream, first:bool):
    if config.output_dir is not None:
        outfile = record_file(strfile, config.output_dir)
        with open(outfile, "w") as f:
            f.write(record)
        Logger.log("Record of \"%s\" saved in \"%s\""%(strfile, outfile), 1)
        return

    if not first:
        stream.write(NL)
    stream.write(record)

def print_results(results, config:NamedTuple, stream)->int:
    global_status = 0
    first = True

    for (strfile, record, error) in results:
        if error is not None:
            if not config.keep_going:
                Logger.error("%s: %s"%(strfile, error), raise_exception=False)
            Logger.warning("Skipping \"%s\": %s"%(strfile, error))
            global_status = 1
            continue

        write_record(record, strfile, config, stream, first)
        first = False

    translated = len([r for r in results if r[2] is None])
    Logger.log("Translated %d of %d test(s)"%(translated, len(config.inputs)), 1)

    return global_status

def run_translations(config:NamedTuple)->int:
    Logger.verbosity = config.verbosity
    Logger.time = config.time

    if not config.inputs:
        Logger.error("No litmus tests to translate", raise_exception=False)

    if config.output_dir is not None:
        check_record_files(config.inputs, config.output_dir)
        os.makedirs(config.output_dir, exist_ok=True)
    elif config.output is None:
        # the records go on stdout
        Logger.stream = sys.stderr

    results = run_jobs(config.inputs, config.processes, config.keep_going)

    if (config.output is not None) and (config.output_dir is None):
        with open(config.output, "w") as f:
            return print_results(results, config, f)

    return print_results(results, config, sys.stdout)

def main():
    if len(sys.argv) == 1:
        litsmt_option_manager.print_help()
        sys.exit(1)

    config = litsmt_option_manager.parse_args()
    sys.exit(run_translations(config))

if __name__ == "__main__":
    main()
