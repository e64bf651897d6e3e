import json
import os

import dukescript_compiler
from dukescript_actions import serialise_bundle
from dukescript_misc import global_options

def compile_script(infile, outfilename=None):
    comp = dukescript_compiler.Compiler()

    print("Parsing \"" + infile + "\"...")
    bundle = comp.compile_file(infile)

    if outfilename is None:
        outfilename = os.path.splitext(infile)[0] + ".json"

    print("Writing to " + outfilename)
    try:
        with open(outfilename, 'w') as outfile:
            outfile.write(json.dumps(serialise_bundle(bundle), indent=global_options.indent))
    except OSError:
        print("Could not save to the file " + str(outfilename) + ", make sure the disk is not write-protected.")
        raise

    return bundle

def describe_script(infile):
    """ Prints each script name in a file with the number of actions it has."""
    bundle = dukescript_compiler.load_script_file(infile)
    print(infile + ": " + str(len(bundle)) + " scripts")
    for name, script in bundle.items():
        print("    " + name + " (" + str(len(script)) + " actions)")
    return bundle
