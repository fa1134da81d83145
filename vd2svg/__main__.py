from vd2svg.cli import main

raise SystemExit(main())
