from bytecode_verify.cli import main

main()
