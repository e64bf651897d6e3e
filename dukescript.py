#!/usr/bin/env python
"""
Duke Script compiler

    Use, distribution, and modification of the Duke Script compiler, source code,
    or documentation, is subject to the terms of the MIT license, as below.

    Copyright (c) 2011 Laurence Dougal Myers

    Permission is hereby granted, free of charge, to any person obtaining a copy
    of this software and associated documentation files (the "Software"), to deal
    in the Software without restriction, including without limitation the rights
    to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
    copies of the Software, and to permit persons to whom the Software is
    furnished to do so, subject to the following conditions:

    The above copyright notice and this permission notice shall be included in
    all copies or substantial portions of the Software.

    THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
    IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
    FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
    AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
    LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
    OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
    THE SOFTWARE.

Compiles Duke Script files (TEXT.MNI, MENU.MNI and friends) into JSON
bundles of named scripts, for use by a game runtime.

Gotchas:
 - Files are read as bytes and decoded one char per byte (latin-1) by default,
   since XYTEXT uses bytes >= 0xEF as markup.
 - A single bad command fails the whole file; nothing is written for it.
"""
import os.path
import sys
from optparse import OptionParser

from dukescript_compiler_helper import compile_script, describe_script
from dukescript_misc import DukeScriptException, global_options

script_extensions = [".mni", ".txt"]

def main(argv=None):
    oparser = OptionParser(usage="%prog [options] arg1 arg2 arg3...",
                           version="dukescript 1.0",
                           description="Compiles Duke Script files into JSON script bundles.")
    oparser.add_option("-o", "--output", action="store",
                       dest="outputfile",
                       help="Specify a name for the output JSON file. " +
                       "If no name is specified, the input file name is used with a .json extension. " +
                       "You cannot specify an output file name if you pass in multiple input files or a directory.")
    oparser.add_option("-e", "--encoding", action="store",
                       dest="encoding",
                       help="Encoding of the script files. [Default: " + global_options.encoding + "]")
    oparser.add_option("-n", "--names", action="store_true",
                       dest="names", default=False,
                       help="Only list the scripts in each file, don't write any JSON.")
    oparser.set_defaults(outputfile=None, encoding=global_options.encoding)

    options, args = oparser.parse_args(argv)
    outputfilename = options.outputfile
    global_options.encoding = options.encoding

    returnval = 0

    if len(args) == 0:
        print("Please give a directory or at least one file name as the argument to dukescript.")
        oparser.print_help()
        return 1

    if len(args) == 1 and os.path.isdir(args[0]):
        args = [os.path.join(args[0], f) for f in sorted(os.listdir(args[0])) if os.path.splitext(f)[1].lower() in script_extensions]

    if outputfilename is not None and len(args) > 1:
        print("You cannot specify an output file name when you have multiple input files.")
        oparser.print_help()
        return 1

    for infile in args:
        if not os.path.isfile(infile):
            print("Invalid filename: " + str(infile))
            returnval = 1
            continue

        try:
            if options.names:
                describe_script(infile)
            else:
                compile_script(infile, outputfilename)

        except DukeScriptException as se:
            returnval = 2
            print("Error parsing input file: " + str(se))
            continue
        except Exception as e:
            returnval = 3
            print("ERROR - Unhandled Exception: " + str(e))
            continue

    return returnval

if __name__ == "__main__":
    sys.exit(main())
