from axisfit.cli import main

raise SystemExit(main())
