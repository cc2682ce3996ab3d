# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from io import StringIO

import pytest

from litsmt.options import litsmt_option_manager
from litsmt.shell import run_translations, translate_file, translation_job
from litsmt.utils.logger import Logger

MP = """AArch64 MP
{ 0:X1=x; 1:X1=x; }
 P0        | P1        ;
 MOV W0,#1 | LDR W0,[X1] ;
 STR W0,[X1] |         ;
exists (1:X0=1)
"""

SB = """AArch64 SB
{ 0:X1=x; 1:X1=y; }
 P0          | P1          ;
 LDR W0,[X1] | LDR W0,[X1] ;
forall (0:X0=0 \\/ 1:X0=0)
"""

LL = """AArch64 LL
{ }
 P0 ;
 NOP ;
exists (0:X0=0:X1)
"""

NOT_UTF8 = b"AArch64 BAD\n\"doc \xff\xfe\"\n{ }\n P0 ;\n NOP ;\nexists (0:X0=0)\n"

@pytest.fixture
def litmus_files(tmp_path, monkeypatch):
    monkeypatch.setattr(Logger, "stream", Logger.stream)
    monkeypatch.setattr(Logger, "prev_warnings", None)
    files = {}
    for (name, text) in [("MP", MP), ("SB", SB), ("LL", LL)]:
        strfile = tmp_path / ("%s.litmus"%name)
        strfile.write_text(text)
        files[name] = str(strfile)
    strfile = tmp_path / "BAD.litmus"
    strfile.write_bytes(NOT_UTF8)
    files["BAD"] = str(strfile)
    return files

def test_default_config():
    config = litsmt_option_manager.get_default_config()
    assert config.inputs == []
    assert config.output is None
    assert config.output_dir is None
    assert config.keep_going is False
    assert config.processes == 1
    assert config.verbosity == 1

    with pytest.raises(RuntimeError):
        litsmt_option_manager.get_default_config(unknown=True)

def test_command_line():
    config = litsmt_option_manager.parse_args(["a.litmus", "b.litmus,c.litmus", "-j", "2", "--keep-going"])
    assert config.inputs == ["a.litmus", "b.litmus", "c.litmus"]
    assert config.processes == 2
    assert config.keep_going is True
    assert config.time is False

def test_config_file(tmp_path):
    strconfig = tmp_path / "litsmt.cfg"
    strconfig.write_text("[GENERAL]\ninputs: a.litmus,b.litmus\nkeep_going: True\nprocesses: 4\n")

    config = litsmt_option_manager.parse_args(["--config", str(strconfig)])
    assert config.inputs == ["a.litmus", "b.litmus"]
    assert config.keep_going is True
    assert config.processes == 4

    config = litsmt_option_manager.parse_args(["--config", str(strconfig), "-j", "2", "c.litmus"])
    assert config.inputs == ["c.litmus"]
    assert config.processes == 2

def test_config_file_errors(tmp_path):
    strconfig = tmp_path / "litsmt.cfg"

    strconfig.write_text("[GENERAL]\nunknown: 1\n")
    with pytest.raises(RuntimeError):
        litsmt_option_manager.parse_args(["--config", str(strconfig)])

    strconfig.write_text("[GENERAL]\nkeep_going: yes\n")
    with pytest.raises(RuntimeError):
        litsmt_option_manager.parse_args(["--config", str(strconfig)])

    strconfig.write_text("[OTHER]\nprocesses: 2\n")
    with pytest.raises(RuntimeError):
        litsmt_option_manager.parse_args(["--config", str(strconfig)])

def test_translation_job(litmus_files):
    (strfile, record, error) = translation_job(litmus_files["MP"])
    assert error is None
    assert record == translate_file(litmus_files["MP"])

    (strfile, record, error) = translation_job(litmus_files["LL"])
    assert record is None
    assert error == "LL atom not yet supported (UnsupportedError)"

    (strfile, record, error) = translation_job(litmus_files["MP"]+".missing")
    assert "FileNotFoundError" in error

def test_stdout(litmus_files, capsys):
    config = litsmt_option_manager.get_default_config(inputs=[litmus_files["MP"], litmus_files["SB"]], verbosity=0)
    assert run_translations(config) == 0

    expected = translate_file(litmus_files["MP"]) + "\n" + translate_file(litmus_files["SB"])
    assert capsys.readouterr().out == expected

def test_output_file(litmus_files, tmp_path):
    outfile = tmp_path / "records.toml"
    config = litsmt_option_manager.get_default_config(inputs=[litmus_files["SB"]], output=str(outfile), verbosity=0)
    assert run_translations(config) == 0
    assert outfile.read_text() == translate_file(litmus_files["SB"])
    assert 'expect = "unsat"\n' in outfile.read_text()

def test_output_dir(litmus_files, tmp_path):
    outdir = tmp_path / "records"
    config = litsmt_option_manager.get_default_config(inputs=[litmus_files["MP"], litmus_files["SB"]],
                                                      output_dir=str(outdir), verbosity=0)
    assert run_translations(config) == 0
    assert (outdir / "MP.toml").read_text() == translate_file(litmus_files["MP"])
    assert (outdir / "SB.toml").read_text() == translate_file(litmus_files["SB"])

def test_stop_on_error(litmus_files, tmp_path, capsys):
    outdir = tmp_path / "records"
    config = litsmt_option_manager.get_default_config(inputs=[litmus_files["LL"], litmus_files["MP"]],
                                                      output_dir=str(outdir), verbosity=0)
    with pytest.raises(SystemExit) as e:
        run_translations(config)
    assert e.value.code == 1
    assert "ERROR: " in capsys.readouterr().err
    assert not (outdir / "MP.toml").exists()

def test_keep_going(litmus_files, tmp_path, capsys):
    outdir = tmp_path / "records"
    config = litsmt_option_manager.get_default_config(inputs=[litmus_files["LL"], litmus_files["MP"]],
                                                      output_dir=str(outdir), keep_going=True, verbosity=0)
    assert run_translations(config) == 1
    assert "WARNING: Skipping" in capsys.readouterr().err
    assert (outdir / "MP.toml").exists()
    assert not (outdir / "LL.toml").exists()

def test_keep_going_not_utf8(litmus_files, tmp_path, capsys):
    (strfile, record, error) = translation_job(litmus_files["BAD"])
    assert record is None
    assert error.startswith(litmus_files["BAD"]+": ")
    assert error.endswith("(LitmusParseError)")

    for processes in [1, 2]:
        outdir = tmp_path / ("records%d"%processes)
        config = litsmt_option_manager.get_default_config(inputs=[litmus_files["BAD"], litmus_files["MP"]],
                                                          output_dir=str(outdir), keep_going=True,
                                                          processes=processes, verbosity=0)
        assert run_translations(config) == 1
        assert (outdir / "MP.toml").read_text() == translate_file(litmus_files["MP"])
        assert not (outdir / "BAD.toml").exists()
    assert "WARNING: Skipping" in capsys.readouterr().err

def test_same_record_file(litmus_files, tmp_path, capsys):
    other = tmp_path / "other"
    other.mkdir()
    (other / "MP.litmus").write_text(MP)
    outdir = tmp_path / "records"
    config = litsmt_option_manager.get_default_config(inputs=[litmus_files["MP"], str(other / "MP.litmus")],
                                                      output_dir=str(outdir), verbosity=0)
    with pytest.raises(SystemExit) as e:
        run_translations(config)
    assert e.value.code == 1
    assert "would both be saved in" in capsys.readouterr().err
    assert not (outdir / "MP.toml").exists()

def test_parallel_time(litmus_files, tmp_path, monkeypatch):
    stream = StringIO()
    monkeypatch.setattr(Logger, "stream", stream)
    monkeypatch.setattr(Logger, "time", False)
    config = litsmt_option_manager.get_default_config(inputs=[litmus_files["MP"], litmus_files["SB"]],
                                                      output_dir=str(tmp_path / "records"),
                                                      processes=2, time=True, verbosity=0)
    assert run_translations(config) == 0
    assert "Timer \"Translation of 2 test(s) with 2 processes\": start\n" in stream.getvalue()
    assert " sec\n" in stream.getvalue()

def test_parallel(litmus_files, capsys):
    inputs = [litmus_files["SB"], litmus_files["MP"]]
    config = litsmt_option_manager.get_default_config(inputs=inputs, processes=2, verbosity=0)
    assert run_translations(config) == 0
    assert capsys.readouterr().out == "\n".join([translate_file(f) for f in inputs])

def test_no_inputs(monkeypatch):
    monkeypatch.setattr(Logger, "stream", Logger.stream)
    with pytest.raises(SystemExit):
        run_translations(litsmt_option_manager.get_default_config(verbosity=0))
